# packages/ocrabi/src/ocrabi/__init__.py
from __future__ import annotations

from .abi import OCR_CONTRACT_CORE_ABI, OCR_CONTRACT_ABI_V1, build_ocr_contract_abi, available_versions

__all__ = ["OCR_CONTRACT_CORE_ABI", "OCR_CONTRACT_ABI_V1", "build_ocr_contract_abi", "available_versions"]
