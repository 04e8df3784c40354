# packages/ocrcodec/src/ocrcodec/ocr_id.py
# -----------------------------------------------------------------------------
# OCR ID <-> contenthash (55 octets / "0x" + 110 hex)
#
#   [tag:1][protocol_version:2][chain_id:8][contract_address:20]
#   [package_index:8][start_block:8][end_block:8]      (entiers big-endian)
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .config import CodecConfig, DEFAULT_CONFIG, resolve_protocol_id
from .errors import InvalidAddressError, InvalidFormatError, OverlongFieldError
from .fixed import FixedField, decode_fixed, encode_fixed, uint_from_be, uint_to_be
from .hexfmt import HEX_PREFIX, is_contenthash_format, is_hex_string

__all__ = [
    "OcrId",
    "OCR_ID_LAYOUT", "OCR_ID_WIDTHS",
    "TAG_WIDTH", "ADDRESS_WIDTH", "CONTENTHASH_BYTES", "CONTENTHASH_HEX_LEN",
    "encode", "encode_as_hex", "decode", "decode_bytes", "address_to_bytes",
    "encode_ocr_id_as_contenthash",
    "encode_ocr_id_as_contenthash_string",
    "decode_ocr_id_from_contenthash",
]

log = logging.getLogger(__name__)

TAG_WIDTH = 1
ADDRESS_WIDTH = 20

#: (champ, largeur) dans l'ordre du fil, tag exclu
OCR_ID_LAYOUT: Tuple[Tuple[str, int], ...] = (
    ("protocol_version", 2),
    ("chain_id", 8),
    ("contract_address", ADDRESS_WIDTH),
    ("package_index", 8),
    ("start_block", 8),
    ("end_block", 8),
)
OCR_ID_WIDTHS: Tuple[int, ...] = tuple(w for _, w in OCR_ID_LAYOUT)

CONTENTHASH_BYTES = TAG_WIDTH + sum(OCR_ID_WIDTHS)      # 55
CONTENTHASH_HEX_LEN = len(HEX_PREFIX) + 2 * CONTENTHASH_BYTES  # 112

_INVALID_CONTENTHASH = "Contenthash is an invalid hex string or has an invalid OCR protocol ID"


@dataclass(frozen=True)
class OcrId:
    """Identifiant de package OCR (forme structurée d'un contenthash)."""
    protocol_version: int
    chain_id: int
    contract_address: str
    package_index: int
    start_block: int
    end_block: int

    # --- conversions ------------------------------------------------------
    @classmethod
    def from_contenthash(cls, value: str, protocol_id: int | None = None) -> "OcrId":
        return decode(value, protocol_id)

    def to_contenthash(self, protocol_id: int | None = None) -> str:
        return encode_as_hex(self, protocol_id)

    def to_bytes(self, protocol_id: int | None = None) -> bytes:
        return encode(self, protocol_id)

    def __bytes__(self) -> bytes:
        return encode(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "protocol_version": int(self.protocol_version),
            "chain_id": int(self.chain_id),
            "contract_address": str(self.contract_address),
            "package_index": int(self.package_index),
            "start_block": int(self.start_block),
            "end_block": int(self.end_block),
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "OcrId":
        return OcrId(
            protocol_version=int(d["protocol_version"]),
            chain_id=int(d["chain_id"]),
            contract_address=str(d["contract_address"]),
            package_index=int(d["package_index"]),
            start_block=int(d["start_block"]),
            end_block=int(d["end_block"]),
        )


def address_to_bytes(address: str) -> bytes:
    if not is_hex_string(address, ADDRESS_WIDTH):
        raise InvalidAddressError("Contract address is not a valid hex string")
    return bytes.fromhex(address[2:])


def encode(ocr_id: OcrId, protocol_id: int | None = None) -> bytes:
    """
    Encode un `OcrId` en contenthash binaire (55 octets).

    Exceptions
    ----------
    InvalidAddressError si `contract_address` n'est pas "0x" + 40 hex.
    OverlongFieldError si un champ numérique ne tient pas dans sa largeur.
    ValueError si `protocol_id` sort de [0..255] ou si un entier est négatif.
    """
    pid = resolve_protocol_id(protocol_id)
    address = address_to_bytes(ocr_id.contract_address)

    fields = [FixedField(uint_to_be(pid, TAG_WIDTH), TAG_WIDTH, "protocol_id")]
    for name, width in OCR_ID_LAYOUT:
        if name == "contract_address":
            fields.append(FixedField(address, width, name))
            continue
        value = getattr(ocr_id, name)
        try:
            raw = uint_to_be(value, width)
        except OverlongFieldError as e:
            raise OverlongFieldError(e.width, e.actual, name) from None
        except ValueError as e:
            raise ValueError(f"{name}: {e}") from None
        fields.append(FixedField(raw, width, name))
    out = encode_fixed(fields)
    log.debug("encoded OCR ID chain=%s package=%s (%d bytes)", ocr_id.chain_id, ocr_id.package_index, len(out))
    return out


def encode_as_hex(ocr_id: OcrId, protocol_id: int | None = None, cfg: CodecConfig | None = None) -> str:
    """Contenthash texte : "0x" + 110 hex (112 caractères)."""
    cfg = cfg or DEFAULT_CONFIG
    if protocol_id is None:
        protocol_id = cfg.protocol_id
    h = encode(ocr_id, protocol_id).hex()
    return HEX_PREFIX + (h if cfg.lowercase else h.upper())


def decode(value: str, protocol_id: int | None = None) -> OcrId:
    """
    Décode un contenthash texte vers un `OcrId`.

    Le format est validé **avant** tout parsing (`is_contenthash_format`) ;
    toute erreur du codec à largeur fixe est propagée telle quelle.
    """
    pid = resolve_protocol_id(protocol_id)
    if not is_contenthash_format(value, pid):
        raise InvalidFormatError(_INVALID_CONTENTHASH)
    return _from_fields(bytes.fromhex(value[2:]))


def decode_bytes(data: bytes, protocol_id: int | None = None) -> OcrId:
    """Inverse de `encode` sur la forme binaire."""
    pid = resolve_protocol_id(protocol_id)
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("decode_bytes: `data` must be bytes")
    data = bytes(data)
    if len(data) != CONTENTHASH_BYTES or data[0] != pid:
        raise InvalidFormatError(_INVALID_CONTENTHASH)
    return _from_fields(data)


def _from_fields(data: bytes) -> OcrId:
    parts = decode_fixed(data, OCR_ID_WIDTHS, offset=TAG_WIDTH)
    values: Dict[str, Any] = {}
    for (name, width), buf in zip(OCR_ID_LAYOUT, parts):
        if name == "contract_address":
            values[name] = HEX_PREFIX + buf.hex()
        else:
            values[name] = uint_from_be(buf, width)
    ocr_id = OcrId(**values)
    log.debug("decoded OCR ID chain=%s package=%s", ocr_id.chain_id, ocr_id.package_index)
    return ocr_id


# Noms historiques
encode_ocr_id_as_contenthash = encode
encode_ocr_id_as_contenthash_string = encode_as_hex
decode_ocr_id_from_contenthash = decode
