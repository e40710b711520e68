"""Stellar signing-device protocol helpers: APDU parsing, dispatch and framing, paths and encodings."""

__version__ = "5.0.1"