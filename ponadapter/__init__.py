"""PON adapter building blocks: status codes, OMCI CRC-32, debug output, optic and event interfaces."""

__version__ = "0.1.0"
__all__ = ["crc", "debug", "errors", "events", "optic"]