"""Wire-format constants: tag bytes, compact-form prefixes and size thresholds.

Compact ("fix") forms pack a small value or length into the low bits of the
leading byte; they are described here as (prefix, prefix width in bits).
"""

from __future__ import annotations

# ── Single-byte tags ─────────────────────────────────────────
TAG_NIL: int = 0xC0
TAG_FALSE: int = 0xC2
TAG_TRUE: int = 0xC3

# ── Fixed-width numeric tags ─────────────────────────────────
TAG_FLOAT32: int = 0xCA  # accepted on decode only, never emitted
TAG_FLOAT64: int = 0xCB
TAG_UINT8: int = 0xCC
TAG_UINT16: int = 0xCD
TAG_UINT32: int = 0xCE
TAG_UINT64: int = 0xCF
TAG_INT8: int = 0xD0
TAG_INT16: int = 0xD1
TAG_INT32: int = 0xD2
TAG_INT64: int = 0xD3

# ── Variable-length tags ─────────────────────────────────────
TAG_RAW16: int = 0xDA
TAG_RAW32: int = 0xDB
TAG_ARRAY16: int = 0xDC
TAG_ARRAY32: int = 0xDD
TAG_MAP16: int = 0xDE
TAG_MAP32: int = 0xDF

# Tag byte -> payload width in bytes, for every fixed-width tag.
FIXED_WIDTHS: dict[int, int] = {
    TAG_FLOAT32: 4,
    TAG_FLOAT64: 8,
    TAG_UINT8: 1,
    TAG_UINT16: 2,
    TAG_UINT32: 4,
    TAG_UINT64: 8,
    TAG_INT8: 1,
    TAG_INT16: 2,
    TAG_INT32: 4,
    TAG_INT64: 8,
}

# Tag byte -> width in bytes of the length/count field that follows it.
LENGTH_WIDTHS: dict[int, int] = {
    TAG_RAW16: 2,
    TAG_RAW32: 4,
    TAG_ARRAY16: 2,
    TAG_ARRAY32: 4,
    TAG_MAP16: 2,
    TAG_MAP32: 4,
}

# Known but unassigned: never valid, no matter what follows.
INVALID_TAGS: frozenset[int] = frozenset(
    [0xC1, 0xC4, 0xC5, 0xC6, 0xC7, 0xC8, 0xC9, 0xD5, 0xD6, 0xD7, 0xD8, 0xD9]
)

# ── Compact forms: (prefix bits, prefix width) ───────────────
POSITIVE_FIXINT = (0b0, 1)
NEGATIVE_FIXINT = (0b111, 3)
FIXRAW = (0b101, 3)
FIXARRAY = (0b1001, 4)
FIXMAP = (0b1000, 4)

# ── Form-selection thresholds (exclusive upper bounds) ───────
POSITIVE_FIXINT_LIMIT: int = 128
UINT8_LIMIT: int = 1 << 8
UINT16_LIMIT: int = 1 << 16
UINT32_LIMIT: int = (1 << 32) - 1  # 0xFFFFFFFF itself goes out as uint 64

# Inclusive lower bounds for the signed forms
NEGATIVE_FIXINT_MIN: int = -32
INT8_MIN: int = -(1 << 7)
INT16_MIN: int = -(1 << 15)
INT32_MIN: int = -(1 << 31)

FIXRAW_LIMIT: int = 6  # the 5-bit field could hold 31, but the encoder stops at 5
FIXCONTAINER_LIMIT: int = 16
LENGTH16_LIMIT: int = 1 << 16

# ── Value ranges ─────────────────────────────────────────────
INT64_MIN: int = -(1 << 63)
UINT64_MAX: int = (1 << 64) - 1
MAX_LENGTH: int = (1 << 32) - 1
