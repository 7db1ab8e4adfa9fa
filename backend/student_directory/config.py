"""Application settings and validation."""

import os


class Settings:
    HOST: str
    PORT: int
    LOG_LEVEL: str
    MAX_BODY_BYTES: int
    SEED_SAMPLE_DATA: bool
    ALLOW_DEV_CORS: bool

    def __init__(self):
        self.HOST = os.getenv("HOST", "127.0.0.1")
        self.PORT = int(os.getenv("PORT", "3000"))
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.MAX_BODY_BYTES = int(os.getenv("MAX_BODY_BYTES", str(1024 * 1024)))  # 1 MB default
        self.SEED_SAMPLE_DATA = os.getenv("SEED_SAMPLE_DATA", "true").lower() == "true"
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self._validate()

    def _validate(self):
        if self.MAX_BODY_BYTES <= 0:
            raise RuntimeError("MAX_BODY_BYTES must be a positive number of bytes")
        if not 0 < self.PORT < 65536:
            raise RuntimeError("PORT must be between 1 and 65535")


settings = Settings()
