"""OCR core — unified API
Install once, import one namespace:

    pip install -e .

Usage:

    import ocr
    h = ocr.encode_as_hex(ocr.OcrId(1, 5354, "0x" + "00" * 20, 0, 1, 2))
    oid = ocr.decode(h)

Or detailed modules:

    from ocr import codec, abi
"""

__version__ = "0.1.0"

import ocrabi as abi
import ocrcodec as codec

from ocrabi import build_ocr_contract_abi
from ocrcodec import (
    OCR_PROTOCOL_ID, CodecConfig, OcrId,
    encode, encode_as_hex, decode, decode_bytes, is_contenthash_format,
)

__all__ = [
    # sub-namespaces
    "codec", "abi",
    # convenience
    "OCR_PROTOCOL_ID", "CodecConfig", "OcrId",
    "encode", "encode_as_hex", "decode", "decode_bytes", "is_contenthash_format",
    "build_ocr_contract_abi",
    "__version__",
]
