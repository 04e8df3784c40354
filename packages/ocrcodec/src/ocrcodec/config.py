# packages/ocrcodec/src/ocrcodec/config.py
from __future__ import annotations
from dataclasses import dataclass

__all__ = ["OCR_PROTOCOL_ID", "CodecConfig", "DEFAULT_CONFIG", "resolve_protocol_id"]

#: Tag de protocole OCR (1er octet de tout contenthash) : 0x4d
OCR_PROTOCOL_ID: int = 77


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """
    Configuration **publique et stable** du codec OCR.

    Champs
    ------
    protocol_id : int, default=77
        Tag écrit en tête du contenthash et attendu au décodage. Doit tenir
        sur un octet (0..255). Les fonctions acceptant `protocol_id=None`
        retombent sur `DEFAULT_CONFIG.protocol_id`.
    lowercase : bool, default=True
        Casse des chiffres hex produits par `encode_as_hex`. Le décodage
        accepte les deux casses.

    Notes
    -----
    - La dataclass est **immuable** (`frozen=True`) : une même config donne
      toujours les mêmes octets.
    - Les validations lèvent une `ValueError`, aucune conversion implicite.
    """

    protocol_id: int = OCR_PROTOCOL_ID
    lowercase: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.protocol_id, int) or isinstance(self.protocol_id, bool):
            raise ValueError("CodecConfig.protocol_id must be an int")
        if not (0 <= self.protocol_id <= 0xFF):
            raise ValueError("CodecConfig.protocol_id must be in [0..255] (u8)")


DEFAULT_CONFIG = CodecConfig()


def resolve_protocol_id(protocol_id: int | None) -> int:
    """`protocol_id` explicite, sinon celui de `DEFAULT_CONFIG`."""
    if protocol_id is None:
        return DEFAULT_CONFIG.protocol_id
    pid = int(protocol_id)
    if not (0 <= pid <= 0xFF):
        raise ValueError(f"protocol_id must be in [0..255], got {pid}")
    return pid
