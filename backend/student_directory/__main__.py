"""Run the API under uvicorn: `python -m student_directory`.

Host, port and log level come from `HOST`, `PORT` and `LOG_LEVEL`
(defaults `127.0.0.1`, `3000` and `INFO`).
"""

import logging

import uvicorn

from .config import settings
from .main import create_app

logger = logging.getLogger("student_directory.api")


def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL)
    app = create_app(settings)
    logger.info("Student directory listening on http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
