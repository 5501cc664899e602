"""Encoders for Codabar, Code 128, Code 39, Code 93, EAN and Data Matrix barcodes."""

__version__ = "0.1.0"
__all__ = ["core", "reedsolomon", "codabar", "code128", "code39", "code93", "datamatrix", "ean"]