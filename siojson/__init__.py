"""JSON values with binary payloads, JSON objects with typed fields, and JSON HTTP requests."""

__version__ = "0.1.0"

__all__ = [
    "binary",
    "convert",
    "jsonobject",
    "library",
    "request",
    "values",
]