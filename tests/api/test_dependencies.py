"""Unit tests for the request body reader in src/api/dependencies.py"""

import asyncio

import pytest
from starlette.requests import Request

from src.api.dependencies import read_body
from src.core.exceptions import RequestTooLargeError


class ChunkedBody:
    """ASGI receive callable handing out the body in fixed-size chunks."""

    def __init__(self, chunk: bytes, chunks: int) -> None:
        self.chunk = chunk
        self.remaining = chunks
        self.received = 0

    async def __call__(self) -> dict:
        self.remaining -= 1
        self.received += 1
        return {
            "type": "http.request",
            "body": self.chunk,
            "more_body": self.remaining > 0,
        }


def _request(
    receive: ChunkedBody, headers: list[tuple[bytes, bytes]] | None = None
) -> Request:
    scope = {"type": "http", "method": "POST", "path": "/", "headers": headers or []}
    return Request(scope, receive)


def test_reads_whole_body() -> None:
    receive = ChunkedBody(b"a" * 16, chunks=4)
    assert asyncio.run(read_body(_request(receive), max_bytes=64)) == b"a" * 64


def test_stops_reading_past_limit() -> None:
    receive = ChunkedBody(b"a" * 16, chunks=1000)
    with pytest.raises(RequestTooLargeError, match="larger than 64 bytes"):
        asyncio.run(read_body(_request(receive), max_bytes=64))
    assert receive.received == 5


def test_declared_length_rejected_before_reading() -> None:
    receive = ChunkedBody(b"a", chunks=1)
    request = _request(receive, headers=[(b"content-length", b"1000000")])
    with pytest.raises(RequestTooLargeError):
        asyncio.run(read_body(request, max_bytes=64))
    assert receive.received == 0
