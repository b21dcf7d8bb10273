"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io
from typing import Callable

import pytest


class TrickleReader(io.RawIOBase):
    """Source that delivers at most ``chunk`` bytes per readinto call."""

    def __init__(self, data: bytes, chunk: int = 1) -> None:
        self._data = data
        self._pos = 0
        self._chunk = chunk
        self.calls = 0

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:  # type: ignore[override]
        self.calls += 1
        n = min(len(buffer), self._chunk, len(self._data) - self._pos)
        buffer[:n] = self._data[self._pos : self._pos + n]
        self._pos += n
        return n


class ShortWriter:
    """Sink that accepts at most ``limit`` bytes per write."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.data = bytearray()

    def write(self, data) -> int:
        accepted = bytes(data[: self.limit])
        self.data += accepted
        return len(accepted)


class BrokenWriter:
    """Sink that raises after ``fail_after`` successful writes."""

    def __init__(self, fail_after: int = 0) -> None:
        self.fail_after = fail_after
        self.writes = 0

    def write(self, data) -> int:
        if self.writes >= self.fail_after:
            raise BrokenPipeError("connection closed")
        self.writes += 1
        return len(data)


class BrokenReader:
    """Source whose readinto always raises."""

    def readinto(self, buffer) -> int:
        raise ConnectionResetError("connection reset")


class NonBlockingReader:
    """Source with no data available right now."""

    def readinto(self, buffer) -> None:
        return None


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing."""
    return b"Hello, framed world!"


@pytest.fixture
def trickle_reader() -> Callable[..., TrickleReader]:
    """Factory for sources that return short reads."""
    return TrickleReader


@pytest.fixture
def short_writer() -> Callable[..., ShortWriter]:
    """Factory for sinks that perform short writes."""
    return ShortWriter


@pytest.fixture
def broken_writer() -> Callable[..., BrokenWriter]:
    """Factory for sinks that raise OSError."""
    return BrokenWriter


@pytest.fixture
def broken_reader() -> BrokenReader:
    """Source that raises OSError."""
    return BrokenReader()


@pytest.fixture
def nonblocking_reader() -> NonBlockingReader:
    """Source that would block."""
    return NonBlockingReader()
