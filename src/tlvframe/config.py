"""Decoder configuration.

The wire format leaves some header checks to the receiver. By default the
decoder is lenient: it ignores the upper nibble of the type byte and accepts
any length width from 0 to 8. ``CodecConfig`` opts into stricter behavior.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for frame decoding.

    Attributes:
        strict_type: Reject a type byte whose upper nibble is not 0xF
            (default False). The nibble is a weak sanity marker, so a lenient
            peer may still send something else there.

        canonical_width: Reject frames whose length width is not the one the
            encoder would have chosen for the decoded size (default False).
            Widths 0, 3, 5, 6 and 7, and oversized widths such as a 4-byte
            field holding 10, fail in this mode.

        max_payload_size: Largest payload size accepted, in bytes (default
            None, meaning any 64-bit size). The check runs after the header is
            read and before the payload buffer is allocated.

    Examples:
        ```python
        from tlvframe import CodecConfig, read_bytes

        # Reject anything a conforming encoder would not produce,
        # and refuse frames over 1 MiB
        config = CodecConfig(strict_type=True, canonical_width=True,
                             max_payload_size=1 << 20)
        payload = read_bytes(stream, config=config)
        ```
    """

    strict_type: bool = False
    canonical_width: bool = False
    max_payload_size: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_payload_size is not None:
            if self.max_payload_size < 0:
                raise ValueError(f"max_payload_size must be >= 0, got {self.max_payload_size}")
            if self.max_payload_size >= 1 << 64:
                raise ValueError(
                    f"max_payload_size must fit in 64 bits, got {self.max_payload_size}"
                )

    @property
    def is_strict(self) -> bool:
        """True when both header checks are enabled."""
        return self.strict_type and self.canonical_width


DEFAULT_CONFIG = CodecConfig()
STRICT_CONFIG = CodecConfig(strict_type=True, canonical_width=True)
