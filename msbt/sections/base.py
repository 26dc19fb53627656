'''
Every section starts with the same 16 bytes

    +------+-------------------------------+------+
    | 0x00 | tag (e.g. "LBL1")             |    4 |
    | 0x04 | size of the payload           |    4 |
    | 0x08 | reserved                      |    8 |
    +------+-------------------------------+------+

and it's followed by the payload and by some 0xab bytes so that the
next section starts at an offset multiple of 16 from the start of the file.
The payload size counts neither the frame nor the padding.
'''
import io

from ..core import Chunk
from .. import fields
from ..enum import Encoding
from ..streams import CountingWriter


PADDING_CHAR = 0xab
PADDING_ALIGNMENT = 0x10


class SectionFrame(Chunk):
    tag          = fields.StringField(4)
    payload_size = fields.StructField('I')
    reserved     = fields.StringField(8)


class Section(Chunk):
    '''Base class for the sections: subclasses indicate the TAG and declare
    the fields of the payload after the frame.

    Subclasses whose payload can be mutated implement update() so that
    the frame's payload size follows the contents.'''
    TAG = None

    frame = SectionFrame()

    def __init__(self, source=None, encoding=None, **kwargs):
        self.encoding = encoding
        super().__init__(source, **kwargs)

        if source is None:
            self.frame.tag.value = self.TAG.value
            self.update()

    @property
    def tag(self):
        return self.TAG

    def get_payload_size(self) -> int:
        return self.frame.payload_size.value

    def set_payload_size(self, value: int):
        self.frame.payload_size.value = value

    payload_size = property(get_payload_size, set_payload_size)

    def get_encoding(self) -> Encoding:
        if self.encoding is not None:
            return self.encoding

        if self.father is not None:
            return self.father.get_encoding()

        return Encoding.UTF16

    def update(self):
        '''Recalculate the derived fields after a change.'''
        pass

    def unpack(self, stream):
        super().unpack(stream)
        self.unpack_payload(stream)

        self.logger.debug('skipping padding after section %s' % self.TAG.name)
        stream.skip_padding(PADDING_CHAR)

    def unpack_payload(self, stream):
        '''Hook for the parts of the payload that the fields don't describe.'''
        pass

    def pack(self, stream=None):
        '''The padding is computed from the bytes already passed through the writer,
        so to be correct the writer must count from the start of the file.'''
        if stream is None:
            writer = CountingWriter(io.BytesIO())
            self.pack(writer)
            return writer.getvalue()

        writer = stream if isinstance(stream, CountingWriter) else CountingWriter(stream)

        super().pack(writer)
        self.pack_payload(writer)

        writer.align(PADDING_ALIGNMENT, PADDING_CHAR)

    def pack_payload(self, writer):
        pass

    def _get_size(self):
        return self.frame.size + self.payload_size

    def _get_raw(self):
        return self.pack()
