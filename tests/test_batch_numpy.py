from __future__ import annotations
import logging

import numpy as np
import pytest

from ocrcodec import OcrId, encode, encode_as_hex
from ocrcodec.batch import CONTENTHASH_DTYPE, encode_many, encode_many_as_hex, decode_many
from ocrcodec.errors import InvalidAddressError, InvalidFormatError, OverlongFieldError


def _ids(n: int):
    rng = np.random.default_rng(0)
    out = []
    for i in range(n):
        out.append(OcrId(
            protocol_version=int(rng.integers(0, 1 << 16)),
            chain_id=int(rng.integers(0, 1 << 62)),
            contract_address="0x" + rng.bytes(20).hex(),
            package_index=i,
            start_block=int(rng.integers(0, 1 << 40)),
            end_block=2**64 - 1 - i,
        ))
    return out


def test_dtype_matches_wire_layout():
    assert CONTENTHASH_DTYPE.itemsize == 55
    assert CONTENTHASH_DTYPE.names[0] == "protocol_id"
    assert CONTENTHASH_DTYPE.fields["contract_address"][1] == 11


def test_encode_many_matches_scalar_encode():
    ids = _ids(16)
    arr = encode_many(ids)
    assert arr.shape == (16,) and arr.dtype == CONTENTHASH_DTYPE
    for row, x in zip(arr, ids):
        assert row.tobytes() == encode(x)
    assert encode_many_as_hex(ids) == [encode_as_hex(x) for x in ids]


def test_decode_many_roundtrip():
    ids = _ids(8)
    assert decode_many(encode_many_as_hex(ids)) == ids
    assert decode_many([]) == []
    assert encode_many([]).shape == (0,)


def test_encode_many_errors():
    ids = _ids(3)
    bad = ids + [OcrId(1, 1, "0x1234", 0, 0, 0)]
    with pytest.raises(InvalidAddressError):
        encode_many(bad)
    with pytest.raises(OverlongFieldError, match="protocol_version"):
        encode_many([OcrId(1 << 16, 1, "0x" + "00" * 20, 0, 0, 0)])
    with pytest.raises(ValueError):
        encode_many([OcrId(1, -5, "0x" + "00" * 20, 0, 0, 0)])


def test_decode_many_strict_and_lenient(caplog):
    hashes = encode_many_as_hex(_ids(3))
    hashes.insert(1, "0xdeadbeef")
    with pytest.raises(InvalidFormatError, match="entry 1"):
        decode_many(hashes)
    with caplog.at_level(logging.WARNING, logger="ocrcodec.batch"):
        out = decode_many(hashes, strict=False)
    assert out[1] is None and all(o is not None for i, o in enumerate(out) if i != 1)
    assert any("entry 1 rejected" in r.getMessage() for r in caplog.records)


def test_decode_many_custom_tag():
    ids = _ids(2)
    hashes = encode_many_as_hex(ids, protocol_id=5)
    assert all(h.startswith("0x05") for h in hashes)
    assert decode_many(hashes, protocol_id=5) == ids
    assert decode_many(hashes, strict=False) == [None, None]
