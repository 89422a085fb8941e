"""Parsing, validation and repair of EAN-13 and UPC-A barcodes."""

__version__ = "0.3.1"
__all__ = ["ean13"]