from __future__ import annotations
import pytest

from ocrcodec.config import CodecConfig, DEFAULT_CONFIG, OCR_PROTOCOL_ID, resolve_protocol_id


def test_defaults():
    assert DEFAULT_CONFIG.protocol_id == OCR_PROTOCOL_ID == 77
    assert DEFAULT_CONFIG.lowercase is True
    assert resolve_protocol_id(None) == 77
    assert resolve_protocol_id(3) == 3


@pytest.mark.parametrize("pid", [-1, 256, True, "77"])
def test_invalid_protocol_id(pid):
    with pytest.raises(ValueError):
        CodecConfig(protocol_id=pid)


def test_resolve_out_of_range():
    with pytest.raises(ValueError):
        resolve_protocol_id(0x100)


def test_config_is_frozen_and_hashable():
    cfg = CodecConfig(protocol_id=1)
    with pytest.raises(Exception):
        cfg.protocol_id = 2  # type: ignore[misc]
    assert hash(cfg) == hash(CodecConfig(protocol_id=1))
