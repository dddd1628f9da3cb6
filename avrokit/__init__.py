"""Buffered reader for primitive values in the Avro binary encoding."""

__version__ = "0.1.0"
__all__ = ["reader"]