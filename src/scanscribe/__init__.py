"""scanscribe - batch OCR with optional translation."""

__version__ = "0.1.0"
