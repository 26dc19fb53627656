'''
Sections whose internal layout is not known (or only partially known): the
payload is kept as a blob of bytes and written back as it is.
'''
from .base import Section
from .. import fields
from .. import byteorder
from ..enum import SectionTag
from ..properties import Dependency


class BlobSection(Section):
    data = fields.StringField(Dependency('.frame.payload_size'))

    def set_data(self, data: bytes):
        self.data.value = data
        self.update()

    def update(self):
        self.payload_size = len(self.data.value)


class AttributeOrderSection(BlobSection):
    TAG = SectionTag.ATO1


class TypeSystemSection(BlobSection):
    TAG = SectionTag.TSY1


class AttributeSection(BlobSection):
    '''ATR1 starts with two integers, the number of entries and the size of
    each one, followed by the entries themselves

        uint32 number of entries
        uint32 size of an entry
        entries

    The blob is the source of truth until the caller sets the entries
    explicitly with set_entries(), from then on the payload is rebuilt from
    them.'''
    TAG = SectionTag.ATR1

    HEADER_SIZE = 8

    def __init__(self, source=None, **kwargs):
        self.entries = None
        self.entry_size = 0
        super().__init__(source, **kwargs)

    def _unpack_header(self):
        raw = self.data.value[:self.HEADER_SIZE]
        if len(raw) < self.HEADER_SIZE:
            return 0, 0

        endianess = self.get_endianess()

        return (
            byteorder.unpack('I', raw[:4], endianess),
            byteorder.unpack('I', raw[4:], endianess),
        )

    def parse_entries(self):
        '''Returns the entry size and the entries found in the blob, the
        blob is not modified.'''
        entry_count, entry_size = self._unpack_header()
        start = self.HEADER_SIZE
        entries = [self.data.value[start + idx * entry_size:start + (idx + 1) * entry_size] for idx in range(entry_count)]

        return entry_size, entries

    def set_data(self, data: bytes):
        self.entries = None
        super().set_data(data)

    def set_entries(self, entries, entry_size=None):
        if entry_size is None:
            entry_size = len(entries[0]) if entries else self._unpack_header()[1]

        for entry in entries:
            if len(entry) != entry_size:
                raise ValueError(f'all the entries must be {entry_size} bytes long')

        self.entry_size = entry_size
        self.entries = [bytes(_) for _ in entries]
        self.update()

    def update(self):
        if self.entries is None:
            return super().update()

        endianess = self.get_endianess()
        entry_count = len(self.entries)

        self.data.value = (
            byteorder.pack('I', entry_count, endianess)
            + byteorder.pack('I', self.entry_size, endianess)
            + b''.join(self.entries)
        )
        self.payload_size = entry_count * self.entry_size + self.HEADER_SIZE
