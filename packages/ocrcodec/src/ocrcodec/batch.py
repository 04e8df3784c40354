# packages/ocrcodec/src/ocrcodec/batch.py
from __future__ import annotations

"""
ocrcodec.batch - encode/decode vectorisés de contenthash

- CONTENTHASH_DTYPE : dtype structuré numpy calqué sur le fil (55 octets/ligne)
- encode_many / encode_many_as_hex : OcrId[] -> tableau structuré / str[]
- decode_many : str[] -> OcrId[] (strict ou tolérant)

Chaque ligne est identique octet pour octet à `ocr_id.encode(...)`.
"""

import logging
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .config import CodecConfig, DEFAULT_CONFIG, resolve_protocol_id
from .errors import InvalidFormatError, OverlongFieldError
from .hexfmt import HEX_PREFIX, is_contenthash_format
from .ocr_id import (
    ADDRESS_WIDTH, OCR_ID_LAYOUT, OcrId, address_to_bytes, _INVALID_CONTENTHASH,
)

__all__ = ["CONTENTHASH_DTYPE", "encode_many", "encode_many_as_hex", "decode_many"]

log = logging.getLogger(__name__)

_NP_FMT = {1: "u1", 2: ">u2", 8: ">u8"}

CONTENTHASH_DTYPE = np.dtype(
    [("protocol_id", "u1")]
    + [
        (name, f"V{width}" if name == "contract_address" else _NP_FMT[width])
        for name, width in OCR_ID_LAYOUT
    ]
)


def _column(records: Sequence[OcrId], name: str, width: int) -> np.ndarray:
    vals = [int(getattr(r, name)) for r in records]
    for v in vals:
        if v < 0:
            raise ValueError(f"{name}: unsigned value expected, got {v}")
        if v >> (8 * width):
            raise OverlongFieldError(width, (v.bit_length() + 7) // 8, name)
    return np.asarray(vals, dtype=np.uint64 if width == 8 else np.uint16)


def encode_many(records: Iterable[OcrId], protocol_id: int | None = None) -> np.ndarray:
    """
    Encode une suite d'`OcrId` en tableau structuré (`CONTENTHASH_DTYPE`).

    Mêmes exceptions que `ocr_id.encode` ; la première erreur interrompt tout
    le lot (aucun résultat partiel).
    """
    recs = list(records)
    pid = resolve_protocol_id(protocol_id)
    out = np.zeros(len(recs), dtype=CONTENTHASH_DTYPE)
    if not recs:
        return out
    out["protocol_id"] = pid
    for name, width in OCR_ID_LAYOUT:
        if name == "contract_address":
            addrs = b"".join(address_to_bytes(r.contract_address) for r in recs)
            out[name] = np.frombuffer(addrs, dtype=f"V{ADDRESS_WIDTH}")
        else:
            out[name] = _column(recs, name, width)
    log.debug("encode_many: %d records", len(recs))
    return out


def encode_many_as_hex(
    records: Iterable[OcrId], protocol_id: int | None = None, cfg: CodecConfig | None = None
) -> List[str]:
    cfg = cfg or DEFAULT_CONFIG
    if protocol_id is None:
        protocol_id = cfg.protocol_id
    arr = encode_many(records, protocol_id)
    hexes = (row.tobytes().hex() for row in arr)
    return [HEX_PREFIX + (h if cfg.lowercase else h.upper()) for h in hexes]


def decode_many(
    hashes: Iterable[str], protocol_id: int | None = None, strict: bool = True
) -> List[Optional[OcrId]]:
    """
    Décode une suite de contenthash.

    strict=True  : `InvalidFormatError` sur la première entrée invalide.
    strict=False : chaque entrée rejetée est journalisée (warning) et vaut None.
    """
    pid = resolve_protocol_id(protocol_id)
    items = list(hashes)
    valid_idx: List[int] = []
    raw: List[bytes] = []
    for i, h in enumerate(items):
        if not is_contenthash_format(h, pid):
            if strict:
                raise InvalidFormatError(f"entry {i}: {_INVALID_CONTENTHASH}")
            log.warning("decode_many: entry %d rejected: %s", i, _INVALID_CONTENTHASH)
            continue
        valid_idx.append(i)
        raw.append(bytes.fromhex(h[2:]))

    out: List[Optional[OcrId]] = [None] * len(items)
    if not raw:
        return out
    arr = np.frombuffer(b"".join(raw), dtype=CONTENTHASH_DTYPE)
    cols = {
        name: arr[name].tolist()
        for name, _ in OCR_ID_LAYOUT
        if name != "contract_address"
    }
    addrs = arr["contract_address"]
    for k, i in enumerate(valid_idx):
        out[i] = OcrId(
            contract_address=HEX_PREFIX + addrs[k].tobytes().hex(),
            **{name: int(col[k]) for name, col in cols.items()},
        )
    log.debug("decode_many: %d/%d decoded", len(valid_idx), len(items))
    return out
