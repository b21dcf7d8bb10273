#!/usr/bin/env python3
"""Basic usage example for tlvframe.

This example demonstrates:
1. Framing raw payloads onto a stream
2. Reading frames back, including a list frame
3. Writing a Pydantic model as frames
4. Calculating frame sizes
"""

from __future__ import annotations

import io

from pydantic import Field

from tlvframe import (
    EndOfStream,
    TlvModel,
    TlvReader,
    TlvWriter,
    encoded_size,
    frame_overhead,
)


class SensorReading(TlvModel):
    """Single sensor sample."""

    sensor: str = Field(description="Sensor name")
    value: float = Field(description="Measured value")
    sequence: int = Field(ge=0, description="Sample counter")


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("tlvframe Basic Usage Example")
    print("=" * 60)
    print()

    stream = io.BytesIO()
    writer = TlvWriter(stream)

    # Raw payloads of growing size pick wider length fields
    print("1. Framing payloads of different sizes...")
    for payload in (b"", b"\xaa\xbb", bytes(300), bytes(70000)):
        written = writer.write(payload)
        print(
            f"   {len(payload):>6} byte payload -> {written:>6} bytes "
            f"(overhead {frame_overhead(payload)})"
        )
    print()

    print("2. Framing a list...")
    items = [b"alpha", b"beta", b"gamma"]
    written = writer.write_list(items)
    print(f"   {len(items)} items -> {written} bytes")
    print()

    print("3. Framing a model...")
    reading = SensorReading(sensor="temp", value=21.5, sequence=1)
    written = reading.dump(stream)
    print(f"   {reading!r} -> {written} bytes")
    print()

    print(f"   Stream holds {len(stream.getvalue())} bytes")
    print(f"   First frame: {stream.getvalue()[:encoded_size(0)].hex()}")
    print()

    # Read everything back in the same order
    print("4. Reading frames back...")
    stream.seek(0)
    reader = TlvReader(stream)
    for _ in range(4):
        print(f"   payload of {len(reader.read_bytes())} bytes")
    print(f"   list: {reader.read_list()}")
    print(f"   model: {SensorReading.load(stream)!r}")

    try:
        reader.read_bytes()
    except EndOfStream:
        print("   end of stream reached cleanly")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
