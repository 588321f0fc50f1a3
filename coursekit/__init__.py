"""Command-line tools for patient and coefficient lists, C declarations, CRC/Hamming/parity encoding and measurement uncertainty."""

__version__ = "0.1.0"

__all__ = ["cdecl", "crc", "hamming", "parity", "patients", "polylist", "uncertainty"]