# packages/ocrabi/src/ocrabi/abi.py
# Signatures (events/fonctions) du contrat OCR, par version de protocole.
from __future__ import annotations
from typing import Dict, List, Optional, Tuple

__all__ = ["OCR_CONTRACT_CORE_ABI", "OCR_CONTRACT_ABI_V1", "build_ocr_contract_abi", "available_versions"]

#: Commun à toutes les versions : permet de lire la version avant le reste
OCR_CONTRACT_CORE_ABI: Tuple[str, ...] = (
    "function protocolVersion() external view returns (uint256)",
)

OCR_CONTRACT_ABI_V1: Tuple[str, ...] = (
    "event StartPublish(uint256 indexed packageIndex, address indexed author)",
    "event EndPublish(uint256 indexed packageIndex, uint64 partCount)",
    "event PackagePart(uint256 indexed packageIndex, uint64 partIndex, bytes data)",
    "function protocolVersion() external view returns (uint256)",
    "function startPublish(bytes memory data, bool end) external returns(uint256)",
    "function publishPart(uint256 packageIndex, bytes memory data, bool end) external",
    "function package(uint256 packageIndex) public view returns(tuple(uint256 startBlock, uint256 endBlock, address author, uint64 partCount))",
)

_ABI_BY_VERSION: Dict[int, Tuple[str, ...]] = {
    1: OCR_CONTRACT_ABI_V1,
}


def build_ocr_contract_abi(protocol_version: int) -> Optional[List[str]]:
    """ABI (liste neuve) pour `protocol_version`, None si version inconnue."""
    abi = _ABI_BY_VERSION.get(protocol_version)
    return list(abi) if abi is not None else None


def available_versions() -> List[int]:
    return sorted(_ABI_BY_VERSION)
