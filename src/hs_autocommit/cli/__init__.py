"""CLI helpers exposed for other modules."""

from .ui import KeyPress, confirm, decode_key, read_key

__all__ = ["KeyPress", "confirm", "decode_key", "read_key"]
