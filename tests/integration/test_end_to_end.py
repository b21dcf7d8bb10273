"""End-to-end integration tests."""

from __future__ import annotations

import enum
import socket
from pathlib import Path
from typing import Optional

import pytest
from pydantic import Field

from tlvframe import (
    STRICT_CONFIG,
    EndOfStream,
    FramingError,
    TlvModel,
    TlvReader,
    TlvWriter,
    TruncatedFrameError,
    decode_list,
    encode,
    encode_list,
    encoded_size,
    iter_frames,
    list_encoded_size,
    load_model,
    peek_size,
    read_bytes,
    read_into,
)
from tlvframe.cli.main import main


class VehicleState(enum.Enum):
    """Vehicle state enum."""

    IDLE = 0
    TRANSIT = 1
    SURVEY = 2


class Telemetry(TlvModel):
    """Periodic telemetry record."""

    vehicle_id: int = Field(ge=0, le=255)
    state: VehicleState
    depth_m: float
    samples: list[int]
    note: Optional[str] = None


class TestFileWorkflow:
    """Test frames written to and read back from files."""

    def test_mixed_frames_through_file(self, tmp_path: Path) -> None:
        """Test bytes, lists and integers share one stream."""
        path = tmp_path / "log.bin"
        payloads = [b"", b"x" * 300, b"y" * 70000]

        with path.open("wb") as f:
            writer = TlvWriter(f)
            for payload in payloads:
                writer.write(payload)
            writer.write_list([b"a", b"bc"])
            writer.write_uint(1 << 40)

        expected_size = sum(encoded_size(p) for p in payloads)
        expected_size += list_encoded_size([b"a", b"bc"])
        expected_size += encoded_size(8)
        assert path.stat().st_size == expected_size

        with path.open("rb") as f:
            reader = TlvReader(f, STRICT_CONFIG)
            assert [reader.read_bytes() for _ in payloads] == payloads
            assert reader.read_list() == [b"a", b"bc"]
            assert reader.read_uint() == 1 << 40
            with pytest.raises(EndOfStream):
                reader.peek_size()

    def test_peek_then_read_into(self, tmp_path: Path) -> None:
        """Test sizing a buffer from the header before reading the payload."""
        path = tmp_path / "one.bin"
        with path.open("wb") as f:
            encode(f, b"payload")

        with path.open("rb") as f:
            size = peek_size(f)
            buffer = bytearray(size)
            # Header already consumed; read the payload directly
            assert f.readinto(buffer) == size
        assert bytes(buffer) == b"payload"

        with path.open("rb") as f:
            buffer = bytearray(32)
            assert read_into(f, buffer) == 7
        assert bytes(buffer[:7]) == b"payload"

    def test_truncated_file(self, tmp_path: Path) -> None:
        """Test a file cut mid-frame reports truncation after the good frames."""
        path = tmp_path / "cut.bin"
        with path.open("wb") as f:
            encode(f, b"first")
            encode(f, b"second")
        path.write_bytes(path.read_bytes()[:-2])

        data = path.read_bytes()
        frames = iter_frames(data)
        assert next(frames) == b"first"
        with pytest.raises(FramingError, match="Truncated payload"):
            next(frames)

        with path.open("rb") as f:
            assert read_bytes(f) == b"first"
            with pytest.raises(TruncatedFrameError):
                read_bytes(f)


class TestSocketWorkflow:
    """Test frames carried over a connected socket pair."""

    def test_frames_over_socket(self) -> None:
        """Test frames survive a real byte stream."""
        left, right = socket.socketpair()
        try:
            with left.makefile("wb") as out:
                encode(out, b"hello")
                encode_list(out, [b"one", b"two", b""])
                out.flush()
            left.shutdown(socket.SHUT_WR)

            with right.makefile("rb") as source:
                assert read_bytes(source) == b"hello"
                assert decode_list(source) == [b"one", b"two", b""]
                with pytest.raises(EndOfStream):
                    read_bytes(source)
        finally:
            left.close()
            right.close()

    def test_model_over_socket(self) -> None:
        """Test a model written to a socket decodes on the other side."""
        telemetry = Telemetry(
            vehicle_id=7,
            state=VehicleState.SURVEY,
            depth_m=42.5,
            samples=[1, -2, 3],
        )

        left, right = socket.socketpair()
        try:
            with left.makefile("wb") as out:
                telemetry.dump(out)
                out.flush()
            left.shutdown(socket.SHUT_WR)

            with right.makefile("rb") as source:
                decoded = load_model(source, Telemetry)
        finally:
            left.close()
            right.close()

        assert decoded == telemetry
        assert decoded.note is None


class TestModelWorkflow:
    """Test models stored alongside plain frames."""

    def test_models_in_a_file(self, tmp_path: Path) -> None:
        """Test several models written back to back."""
        records = [
            Telemetry(vehicle_id=i, state=VehicleState.TRANSIT, depth_m=i * 1.5, samples=[i])
            for i in range(5)
        ]
        records.append(
            Telemetry(vehicle_id=9, state=VehicleState.IDLE, depth_m=0.0, samples=[], note="done")
        )

        path = tmp_path / "telemetry.bin"
        with path.open("wb") as f:
            for record in records:
                record.dump(f)

        with path.open("rb") as f:
            decoded = [Telemetry.load(f) for _ in records]
            with pytest.raises(EndOfStream):
                Telemetry.load(f)

        assert decoded == records

    def test_cli_inspects_model_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the CLI lists the fields of a stored model."""
        path = tmp_path / "model.bin"
        path.write_bytes(
            Telemetry(vehicle_id=1, state=VehicleState.SURVEY, depth_m=2.0, samples=[]).to_bytes()
        )

        assert main(["--list", str(path), "--strict"]) == 0
        assert "List of 5 items" in capsys.readouterr().out
