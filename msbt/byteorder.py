'''
Integer encoding with a byte order chosen at runtime.

The byte order of a file is given by its byte-order mark, so all the
multi-byte integers pass from here.
'''
from bitstring import Bits

from .meta import Endianess
from .exceptions import BomException


BOM_BIG_ENDIAN    = b'\xfe\xff'
BOM_LITTLE_ENDIAN = b'\xff\xfe'

# sizes in bytes of the struct-like formats supported by the fields
FORMAT_SIZES = {
    'B': 1,
    'H': 2,
    'I': 4,
}


def endianess_from_bom(bom: bytes) -> Endianess:
    if bom == BOM_BIG_ENDIAN:
        return Endianess.BIG_ENDIAN
    if bom == BOM_LITTLE_ENDIAN:
        return Endianess.LITTLE_ENDIAN

    raise BomException(bom)


def bom_from_endianess(endianess: Endianess) -> bytes:
    return BOM_BIG_ENDIAN if endianess == Endianess.BIG_ENDIAN else BOM_LITTLE_ENDIAN


def calcsize(format: str) -> int:
    return FORMAT_SIZES[format]


def unpack(format: str, raw: bytes, endianess: Endianess) -> int:
    if len(raw) != calcsize(format):
        raise ValueError(f"format '{format}' needs {calcsize(format)} bytes, got {len(raw)}")

    bits = Bits(raw)
    if format == 'B':
        return bits.uint

    return bits.uintbe if endianess == Endianess.BIG_ENDIAN else bits.uintle


def pack(format: str, value: int, endianess: Endianess) -> bytes:
    length = calcsize(format) * 8
    if not 0 <= value < (1 << length):
        raise ValueError(f"value {value} doesn't fit format '{format}'")

    if format == 'B':
        return Bits(uint=value, length=length).bytes

    if endianess == Endianess.BIG_ENDIAN:
        return Bits(uintbe=value, length=length).bytes

    return Bits(uintle=value, length=length).bytes
