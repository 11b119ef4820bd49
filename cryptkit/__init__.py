"""Helpers for cryptographic code: hex decoding, in/out buffers, opaque reprs and Wycheproof vector conversion."""

__version__ = "0.1.0"