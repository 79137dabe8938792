"""Kind classification exports."""

from .kind_classifier import BYTE_SEQUENCE, SchemaType, UnsupportedKindError, classify, is_byte

__all__ = [
    "BYTE_SEQUENCE",
    "SchemaType",
    "UnsupportedKindError",
    "classify",
    "is_byte",
]
