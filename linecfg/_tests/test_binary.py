import base64

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from linecfg import config_context
from linecfg.binary import base64_decode, base64_encode, decode_binary, encode_binary
from linecfg.buffer import GrowableBuffer
from linecfg.constants import BASE64_ALPHABET
from linecfg.context import create_memory_context

from ._helpers import read_all, reader_for


def _payload(size):
    return (bytes(range(256)) * (size // 256 + 1))[:size]


def _write_block(pair, data):
    with pair.writer() as ctx:
        ctx.add_line("<DATA")
        encode_binary(ctx, data)
        ctx.add_line(">")
        assert not ctx.has_error


def _read_block(pair, buffer=None):
    buffer = GrowableBuffer() if buffer is None else buffer
    with pair.reader() as ctx:
        assert ctx.get_line() == "<DATA"
        ok = decode_binary(ctx, buffer)
        assert ctx.get_line() is None
    return ok, buffer


def test_chunking():
    buffer = GrowableBuffer()
    ctx = create_memory_context(buffer)
    encode_binary(ctx, _payload(100))

    lines = read_all(create_memory_context(buffer))
    assert len(lines) == 3
    assert [len(line) for line in lines] == [56, 56, 28]
    assert lines[2].endswith("=")


@pytest.mark.parametrize("size", [0, 1, 2, 3, 39, 40, 41, 100, 1000])
def test_roundtrip(pair, size):
    data = _payload(size)
    _write_block(pair, data)

    ok, buffer = _read_block(pair)
    assert ok
    assert buffer.tobytes() == data


def test_roundtrip_numpy(pair):
    arr = np.arange(37, dtype="<u4")
    _write_block(pair, arr)

    ok, buffer = _read_block(pair)
    assert ok
    assert_array_equal(np.frombuffer(buffer.tobytes(), dtype="<u4"), arr)


def test_roundtrip_memoryview(pair):
    data = memoryview(_payload(64))
    _write_block(pair, data[8:])

    ok, buffer = _read_block(pair)
    assert ok
    assert buffer.tobytes() == bytes(data[8:])


def test_decode_appends(pair):
    data = _payload(50)
    _write_block(pair, data)

    ok, buffer = _read_block(pair, GrowableBuffer(b"xy"))
    assert ok
    assert buffer.tobytes() == b"xy" + data


def test_decode_skips_nested_blocks():
    ctx = reader_for(b"YWI=\r\n<NESTED\r\nYWJj\r\n>\r\nY2Q=\r\n>\r\nAFTER\r\n")
    buffer = GrowableBuffer()
    assert decode_binary(ctx, buffer)
    assert buffer.tobytes() == b"abcd"
    assert ctx.get_line() == "AFTER"


def test_decode_unterminated_keeps_partial():
    ctx = reader_for(b"YWI=\r\nY2Q=\r\n")
    buffer = GrowableBuffer()
    assert not decode_binary(ctx, buffer)
    assert buffer.tobytes() == b"abcd"


def test_decode_ignores_noise():
    with_blanks = b"YWI=\r\n\r\n\r\n   \r\n# comment\r\nY2Q=\r\n\r\n>\r\n"
    without_blanks = b"YWI=\r\nY2Q=\r\n>\r\n"

    results = []
    for content in (with_blanks, without_blanks):
        buffer = GrowableBuffer()
        assert decode_binary(reader_for(content), buffer)
        results.append(buffer.tobytes())

    assert results[0] == results[1] == b"abcd"


def test_decode_stage_limit():
    data = _payload(40)
    with config_context() as cfg:
        cfg.base64_stage_size = 4
        ctx = reader_for(base64_encode(data).encode("ascii") + b"\r\n>\r\n")
        buffer = GrowableBuffer()
        assert decode_binary(ctx, buffer)

    assert buffer.tobytes() == data[:4]


def test_base64_encode():
    assert base64_encode(b"") == ""
    assert base64_encode(b"A") == "QQ=="
    assert base64_encode(b"AB") == "QUI="
    assert base64_encode(b"ABC") == "QUJD"
    assert base64_encode(bytes([0xFB, 0xFF])) == "+/8="


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("QUJD", b"ABC"),
        ("QUI=", b"AB"),
        ("QQ==", b"A"),
        ("QUJD!!!!", b"ABC"),
        ("QUJDR", b"ABC"),
        ("QUJDRA", b"ABCD"),
        ("QUI=QUJD", b"AB"),
        ("", b""),
        ("!QUJD", b""),
        ("+/8=", bytes([0xFB, 0xFF])),
    ],
)
def test_base64_decode_lenient(text, expected):
    assert base64_decode(text, 8192) == expected


def test_base64_decode_capacity():
    assert base64_decode("QUJD", 2) == b"AB"
    assert base64_decode("QUJD", 0) == b""


def test_base64_decode_full_alphabet():
    expected = base64.b64decode(BASE64_ALPHABET)
    assert base64_decode(BASE64_ALPHABET, 8192) == expected
    assert base64_decode(BASE64_ALPHABET + "-_AAAA", 8192) == expected
