import io

import pytest

from conftest import build_header
from msbt.enum import Encoding
from msbt.header import Header, MAGIC, HEADER_SIZE
from msbt.meta import Endianess
from msbt.exceptions import MagicException, BomException, EncodingException, ChunkUnpackException


def test_default_header():
    header = Header()

    assert header.size == HEADER_SIZE
    assert header.magic.value == MAGIC
    assert header.byte_order == Endianess.LITTLE_ENDIAN
    assert header.get_encoding() == Encoding.UTF16
    assert header.pack() == build_header(endian='<', encoding=1)


@pytest.mark.parametrize('endian,endianess', [
    ('<', Endianess.LITTLE_ENDIAN),
    ('>', Endianess.BIG_ENDIAN),
])
def test_header_unpack(endian, endianess):
    data = build_header(endian=endian, encoding=0, section_count=3, file_size=0x1234)

    header = Header(data)

    assert header.byte_order == endianess
    assert header.encoding.value == Encoding.UTF8
    assert header.section_count.value == 3
    assert header.file_size.value == 0x1234
    assert header.padding.value == b'\x00' * 10

    assert header.pack() == data


def test_header_reserved_fields_are_preserved():
    data = bytearray(build_header())
    data[0x0a:0x0c] = b'\x01\x02'
    data[0x0d] = 0x03
    data[0x10:0x12] = b'\x04\x05'
    data[0x16:0x20] = bytes(range(1, 11))
    data = bytes(data)

    assert Header(data).pack() == data


def test_header_invalid_magic():
    fileobj = io.BytesIO(build_header(magic=b'MsgPrjBn'))

    with pytest.raises(MagicException):
        Header(fileobj)

    # nothing after the magic is read
    assert fileobj.tell() == 8


@pytest.mark.parametrize('bom', [b'\x00\x00', b'\xfe\xfe', b'\xff\xff'])
def test_header_invalid_bom(bom):
    with pytest.raises(BomException) as excinfo:
        Header(build_header(bom=bom))

    assert excinfo.value.bom == bom


@pytest.mark.parametrize('encoding', [2, 0x80, 0xff])
def test_header_invalid_encoding(encoding):
    with pytest.raises(EncodingException) as excinfo:
        Header(build_header(encoding=encoding))

    assert excinfo.value.value == encoding


def test_header_truncated():
    with pytest.raises(ChunkUnpackException) as excinfo:
        Header(build_header()[:20])

    assert excinfo.value.chain == ['file_size']


def test_header_change_endianess():
    header = Header(build_header(endian='<', section_count=2))

    header.byte_order = Endianess.BIG_ENDIAN

    assert header.bom.value == b'\xfe\xff'
    assert header.pack() == build_header(endian='>', section_count=2)
