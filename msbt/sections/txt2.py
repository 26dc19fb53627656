'''
# TXT2: the strings

    uint32 number of strings
    uint32 offsets[number of strings]
    strings

The offsets are relative to the start of the payload (i.e. the number of
strings) and each string ends where the following begins; the last one
ends with the payload. The strings are usually NUL terminated but the
terminator is part of the string as far as we are concerned.

Two representations are kept index-aligned: the decoded strings and the
raw bytes. Only the raw bytes are written, so a string never touched is
written back as it was found, control sequences included.
'''
from .base import Section
from .. import fields
from .. import text
from ..enum import SectionTag
from ..properties import Dependency
from ..exceptions import UnpackException


class TextSection(Section):
    TAG = SectionTag.TXT2

    string_count = fields.StructField('I')
    offsets      = fields.ArrayField(fields.StructField('I'), n=Dependency('.string_count'))

    def __init__(self, source=None, **kwargs):
        self.strings = []
        self.raw_strings = []
        super().__init__(source, **kwargs)

    def __getitem__(self, index):
        return self.strings[index]

    def unpack_payload(self, stream):
        # the offsets are relative to the string count
        payload_start = self.string_count.offset
        payload_size = self.payload_size
        encoding = self.get_encoding()
        endianess = self.get_endianess()

        offsets = [_.value for _ in self.offsets]
        ends = offsets[1:] + [payload_size]

        self.strings = []
        self.raw_strings = []
        for idx, (start, end) in enumerate(zip(offsets, ends)):
            if end < start:
                raise UnpackException(chain=['offsets'], message=f'string {idx} ends (0x{end:x}) before it starts (0x{start:x})')

            stream.seek(payload_start + start)
            raw = stream.read_exact(end - start)

            self.raw_strings.append(raw)
            self.strings.append(text.decode(raw, encoding, endianess))

        self.logger.debug('read %d strings' % len(self.strings))

    def pack(self, stream=None):
        self._sync_offsets()
        return super().pack(stream)

    def pack_payload(self, writer):
        for raw in self.raw_strings:
            writer.write(raw)

    def _sync_offsets(self):
        '''The offsets are always derived from the raw strings.'''
        offsets = []
        total = self.string_count.size + len(self.raw_strings) * 4
        for raw in self.raw_strings:
            offset = self.offsets.instance_element()
            offset.value = total
            offsets.append(offset)
            total += len(raw)

        self.offsets.value = offsets

    def _encode(self, value):
        return text.encode(value, self.get_encoding(), self.get_endianess())

    def set_strings(self, strings):
        '''Replace all the strings, re-encoding each of them.

        NOTE: control sequences are not parsed, re-encoding a string read from
              a file is not guaranteed to give back its original bytes; use
              set_string() to change only some of them.'''
        self.strings = list(strings)
        self.raw_strings = [self._encode(_) for _ in self.strings]
        self.update()

    def set_string(self, index, value):
        '''Replace a single string, the raw bytes of the others are untouched.'''
        self.strings[index] = value
        self.raw_strings[index] = self._encode(value)
        self.update()

    def append(self, value):
        self.strings.append(value)
        self.raw_strings.append(self._encode(value))
        self.update()

        return len(self.strings) - 1

    def update(self):
        self.string_count.value = len(self.strings)
        self._sync_offsets()
        self.payload_size = sum(len(_) for _ in self.raw_strings) + self.string_count.value * 4 + self.string_count.size
