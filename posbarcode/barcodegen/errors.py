__all__ = ["BarcodeGenError"]


class BarcodeGenError(Exception):
    """Barcode option/preset/rendering error (never raised for malformed values)."""
