# packages/ocrcodec/src/ocrcodec/errors.py
from __future__ import annotations

__all__ = [
    "OcrCodecError",
    "InvalidAddressError",
    "InvalidFormatError",
    "LengthMismatchError",
    "ArityMismatchError",
    "OverlongFieldError",
]


class OcrCodecError(ValueError):
    """Racine des erreurs du codec OCR (sous-classe de ValueError)."""


class InvalidAddressError(OcrCodecError):
    """`contract_address` n'est pas "0x" + 40 caractères hex."""


class InvalidFormatError(OcrCodecError):
    """Contenthash rejeté par `is_contenthash_format` (préfixe, hex, longueur ou tag)."""


class LengthMismatchError(OcrCodecError):
    def __init__(self, expected: int, actual: int):
        self.expected = int(expected)
        self.actual = int(actual)
        super().__init__(
            f"Sum of lengths {self.expected} does not match the number of bytes {self.actual}"
        )


class ArityMismatchError(OcrCodecError):
    def __init__(self, expected: int, actual: int):
        self.expected = int(expected)
        self.actual = int(actual)
        super().__init__(
            f"Expected buffer of length {self.expected}. Received buffer of length {self.actual}."
        )


class OverlongFieldError(OcrCodecError):
    def __init__(self, width: int, actual: int, name: str | None = None):
        self.width = int(width)
        self.actual = int(actual)
        self.name = name
        what = f"field '{name}'" if name else "field"
        super().__init__(f"{what} needs {self.actual} bytes but is declared {self.width} bytes wide")
