# packages/ocrcodec/src/ocrcodec/hexfmt.py
from __future__ import annotations

from .config import DEFAULT_CONFIG

__all__ = ["HEX_PREFIX", "is_hex_string", "is_contenthash_format", "validate_format"]

HEX_PREFIX = "0x"
_HEXDIGITS = frozenset("0123456789abcdefABCDEF")

# Longueur d'un contenthash en octets (tag + champs), dupliquée depuis ocr_id
# pour éviter l'import circulaire.
_CONTENTHASH_BYTES = 55


def is_hex_string(value: str, length: int) -> bool:
    """True si `value` = "0x" + exactement `length` octets en hex."""
    if not isinstance(value, str) or not value.startswith(HEX_PREFIX):
        return False
    body = value[2:]
    if any(c not in _HEXDIGITS for c in body):
        return False
    return len(value) == 2 + 2 * length


def is_contenthash_format(value: str, protocol_id: int | None = None) -> bool:
    """
    True si `value` a la forme d'un contenthash OCR portant le tag attendu.

    Seul garde-fou avant décodage : préfixe "0x", chiffres hex uniquement,
    112 caractères au total, premier octet == `protocol_id` (défaut 77).
    """
    if not is_hex_string(value, _CONTENTHASH_BYTES):
        return False
    expected = DEFAULT_CONFIG.protocol_id if protocol_id is None else int(protocol_id)
    return int(value[2:4], 16) == expected


validate_format = is_contenthash_format
