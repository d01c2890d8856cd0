"""Frame objects with marker, header, version, CRC32 checksum and length, plus byte escaping."""

__version__ = "0.0.1"
__all__ = ["encoder"]