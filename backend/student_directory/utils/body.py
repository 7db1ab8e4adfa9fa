"""Bounded request body reading and JSON decoding."""

from __future__ import annotations

import json
from typing import Any

from starlette.requests import Request

from ..errors import MalformedBody, PayloadTooLarge


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def decode_json_body(raw: bytes) -> Any:
    """Decode `raw` as JSON. An empty body decodes to an empty object."""
    if not raw:
        return {}
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError, UnicodeDecodeError, or nesting deeper than the decoder can follow
        raise MalformedBody() from exc


async def read_body(request: Request, max_bytes: int) -> bytes:
    """Read the whole request body, failing once it grows past `max_bytes`."""
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > max_bytes:
        raise PayloadTooLarge()
    buf = bytearray()
    async for chunk in request.stream():
        buf.extend(chunk)
        if len(buf) > max_bytes:
            raise PayloadTooLarge()
    return bytes(buf)


async def read_json_body(request: Request, max_bytes: int) -> Any:
    return decode_json_body(await read_body(request, max_bytes))
