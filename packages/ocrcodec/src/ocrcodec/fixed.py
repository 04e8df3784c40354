# packages/ocrcodec/src/ocrcodec/fixed.py
# -----------------------------------------------------------------------------
# Codec à largeur fixe : pack/unpack d'une suite de buffers vers des champs
# de largeur déclarée. Aucune connaissance de la sémantique OCR ici.
# -----------------------------------------------------------------------------
from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import List, Sequence

from .errors import ArityMismatchError, LengthMismatchError, OverlongFieldError

__all__ = [
    "FixedField",
    "encode_fixed", "encode_fixed_bytes", "decode_fixed",
    "uint_to_be", "uint_from_be",
]

_BE = ">"  # big-endian

# Largeur (octets) -> code struct des entiers non signés
_UINT_FMT = {1: "B", 2: "H", 4: "I", 8: "Q"}


@dataclass(frozen=True, slots=True)
class FixedField:
    """Buffer associé à sa largeur déclarée (en octets)."""
    value: bytes
    width: int
    name: str | None = None

    def __post_init__(self) -> None:
        if int(self.width) < 0:
            raise ValueError("FixedField.width must be >= 0")


def encode_fixed(fields: Sequence[FixedField]) -> bytes:
    """
    Concatène les champs, chacun front-paddé de zéros jusqu'à sa largeur.

    Le champ est aligné à droite (sémantique big-endian). Un buffer plus long
    que sa largeur n'est jamais tronqué : `OverlongFieldError`.
    """
    out = bytearray()
    for f in fields:
        n = len(f.value)
        if n > f.width:
            raise OverlongFieldError(f.width, n, f.name)
        out += b"\x00" * (f.width - n)
        out += f.value
    return bytes(out)


def encode_fixed_bytes(buffers: Sequence[bytes], widths: Sequence[int]) -> bytes:
    """Variante à listes parallèles de `encode_fixed`."""
    if len(buffers) != len(widths):
        raise ValueError(f"got {len(buffers)} buffers for {len(widths)} widths")
    return encode_fixed([FixedField(bytes(b), int(w)) for b, w in zip(buffers, widths)])


def decode_fixed(data: bytes, widths: Sequence[int], offset: int = 0) -> List[bytes]:
    """
    Découpe `data[offset:]` en une tranche par largeur, dans l'ordre.

    `len(data) - offset` doit valoir exactement `sum(widths)` : pas de
    padding ni de troncature au décodage.
    """
    total = sum(int(w) for w in widths)
    if offset < 0 or offset > len(data) or len(data) - offset != total:
        raise LengthMismatchError(total, len(data) - offset)
    view = memoryview(data)
    out: List[bytes] = []
    off = offset
    for w in widths:
        out.append(bytes(view[off:off + w]))
        off += w
    return out


def uint_to_be(value: int, width: int) -> bytes:
    fmt = _UINT_FMT.get(width)
    if fmt is None:
        raise ValueError(f"unsupported integer width {width}")
    value = int(value)
    if value < 0:
        raise ValueError(f"unsigned value expected, got {value}")
    if value >> (8 * width):
        raise OverlongFieldError(width, (value.bit_length() + 7) // 8)
    return struct.pack(_BE + fmt, value)


def uint_from_be(buf: bytes, width: int) -> int:
    """Relit un entier non signé big-endian de `width` octets."""
    fmt = _UINT_FMT.get(width)
    if fmt is None:
        raise ValueError(f"unsupported integer width {width}")
    if len(buf) != width:
        raise ArityMismatchError(width, len(buf))
    (v,) = struct.unpack(_BE + fmt, buf)
    return v
