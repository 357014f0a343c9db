"""Codec configuration.

This module provides the configuration dataclass shared by the encoder,
the decoder and the stream unpacker.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Codec recursion costs two frames per nesting level, but pydantic model
# __eq__ and __repr__ cost several; values nested deeper than this could be
# decoded yet not compared or printed under the default recursion limit.
MAX_SUPPORTED_DEPTH = 192


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for encode/decode calls.

    Attributes:
        max_depth: Maximum number of nested container levels accepted by
            encode and decode (default 128). A scalar needs 0 levels, [1, 2]
            needs 1 and [[1], 2] needs 2.

        max_buffer_size: Upper bound in bytes for the pending buffer of a
            StreamUnpacker (default None = unbounded). Has no effect on the
            one-shot functions.

    Examples:
        ```python
        from tagpack import CodecConfig, decode

        # Untrusted peer: shallow documents, bounded buffering
        config = CodecConfig(max_depth=16, max_buffer_size=1 << 20)
        result = decode(data, config=config)
        ```
    """

    max_depth: int = 128
    max_buffer_size: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not 1 <= self.max_depth <= MAX_SUPPORTED_DEPTH:
            raise ValueError(
                f"max_depth must be 1-{MAX_SUPPORTED_DEPTH}, got {self.max_depth}"
            )

        if self.max_buffer_size is not None and self.max_buffer_size <= 0:
            raise ValueError(f"max_buffer_size must be > 0, got {self.max_buffer_size}")


DEFAULT_CONFIG = CodecConfig()
