"""JSON text helpers."""

from serialization.json_codec import from_json, positional, to_json

__all__ = ["from_json", "positional", "to_json"]
