# packages/ocrcodec/src/ocrcodec/__init__.py
from __future__ import annotations

"""OCR core - codec contenthash (public surface).

Expose le record `OcrId`, l'encode/decode contenthash, le codec à largeur
fixe et la config. Le codec numpy par lots reste dans `ocrcodec.batch`.
"""

__version__ = "0.1.0"

from .config import OCR_PROTOCOL_ID, CodecConfig, DEFAULT_CONFIG
from .errors import (
    OcrCodecError, InvalidAddressError, InvalidFormatError,
    LengthMismatchError, ArityMismatchError, OverlongFieldError,
)
from .fixed import FixedField, encode_fixed, encode_fixed_bytes, decode_fixed, uint_to_be, uint_from_be
from .hexfmt import is_hex_string, is_contenthash_format, validate_format
from .ocr_id import (
    OcrId, OCR_ID_LAYOUT, OCR_ID_WIDTHS, CONTENTHASH_BYTES, CONTENTHASH_HEX_LEN,
    encode, encode_as_hex, decode, decode_bytes,
    encode_ocr_id_as_contenthash, encode_ocr_id_as_contenthash_string, decode_ocr_id_from_contenthash,
)

__all__ = [
    "__version__",
    "OCR_PROTOCOL_ID", "CodecConfig", "DEFAULT_CONFIG",
    "OcrCodecError", "InvalidAddressError", "InvalidFormatError",
    "LengthMismatchError", "ArityMismatchError", "OverlongFieldError",
    "FixedField", "encode_fixed", "encode_fixed_bytes", "decode_fixed", "uint_to_be", "uint_from_be",
    "is_hex_string", "is_contenthash_format", "validate_format",
    "OcrId", "OCR_ID_LAYOUT", "OCR_ID_WIDTHS", "CONTENTHASH_BYTES", "CONTENTHASH_HEX_LEN",
    "encode", "encode_as_hex", "decode", "decode_bytes",
    "encode_ocr_id_as_contenthash", "encode_ocr_id_as_contenthash_string", "decode_ocr_id_from_contenthash",
]
