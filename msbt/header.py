'''
The fixed 32 bytes at the start of a MSBT file:

    +------+-----------------------------------+------+
    | 0x00 | magic "MsgStdBn"                  |    8 |
    | 0x08 | byte order mark                   |    2 |
    | 0x0a | reserved                          |    2 |
    | 0x0c | encoding (0 = UTF-8, 1 = UTF-16)  |    1 |
    | 0x0d | reserved                          |    1 |
    | 0x0e | number of sections                |    2 |
    | 0x10 | reserved                          |    2 |
    | 0x12 | file size                         |    4 |
    | 0x16 | reserved                          |   10 |
    +------+-----------------------------------+------+

The byte order mark decides the endianess of every integer that follows
in the file, the header's fields included.
'''
from .core import Chunk
from . import fields
from .byteorder import endianess_from_bom, bom_from_endianess, BOM_LITTLE_ENDIAN
from .enum import Encoding
from .meta import Endianess
from .exceptions import EncodingException


MAGIC = b'MsgStdBn'
HEADER_SIZE = 0x20


class BomField(fields.StringField):
    '''The byte order mark is validated as soon as it's read, there is no
    default endianess to fall back to.'''

    def __init__(self, **kwargs):
        super().__init__(2, default=BOM_LITTLE_ENDIAN, **kwargs)

    def unpack(self, stream):
        super().unpack(stream)
        endianess_from_bom(self.value)


class EncodingField(fields.StructField):

    def __init__(self, **kwargs):
        super().__init__('B', enum=Encoding, default=Encoding.UTF16, **kwargs)

    def _unpack_enum(self, value):
        try:
            return self.enum(value)
        except ValueError:
            raise EncodingException(value)


class Header(Chunk):
    magic         = fields.StringField(8, default=MAGIC, is_magic=True)
    bom           = BomField()
    reserved_1    = fields.StructField('H')
    encoding      = EncodingField()
    reserved_2    = fields.StructField('B')
    section_count = fields.StructField('H')
    reserved_3    = fields.StructField('H')
    file_size     = fields.StructField('I')
    padding       = fields.StringField(10)

    def get_endianess(self) -> Endianess:
        return endianess_from_bom(self.bom.value)

    def set_endianess(self, endianess: Endianess):
        self.bom.value = bom_from_endianess(endianess)

    byte_order = property(get_endianess, set_endianess)

    def get_encoding(self) -> Encoding:
        return self.encoding.value
