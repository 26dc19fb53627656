'''
# MsgStdBn files

The file is a header followed by a sequence of sections, each one
identified by a tag; every section kind appears at most once but the
order is not fixed, so it's remembered and used when writing.

The labels (LBL1) point by index to the strings (TXT2): once both are read,
each label gets a copy of its string. Changing the string of a label must
pass from the file (see set_label_value()) so that both sides stay in sync.
'''
import io
import logging
from typing import Optional, Union

from .core import Chunk
from .header import Header
from .enum import Encoding, SectionTag
from .meta import Endianess
from .sections import SECTIONS, Section, Label
from .streams import CountingWriter
from .exceptions import (
    SectionException,
    UnpackException,
    ChunkUnpackException,
)


logger = logging.getLogger(__name__)


class MsbtFile(Chunk):
    header = Header()

    def __init__(self, source=None, **kwargs):
        self.section_order = []
        self.sections = {}
        super().__init__(source, **kwargs)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(_.name for _ in self.section_order))

    def get_endianess(self) -> Endianess:
        return self.header.get_endianess()

    def get_encoding(self) -> Encoding:
        return self.header.get_encoding()

    def get_section(self, tag: SectionTag) -> Optional[Section]:
        return self.sections.get(tag)

    lbl1 = property(lambda self: self.get_section(SectionTag.LBL1))
    nli1 = property(lambda self: self.get_section(SectionTag.NLI1))
    ato1 = property(lambda self: self.get_section(SectionTag.ATO1))
    atr1 = property(lambda self: self.get_section(SectionTag.ATR1))
    tsy1 = property(lambda self: self.get_section(SectionTag.TSY1))
    txt2 = property(lambda self: self.get_section(SectionTag.TXT2))

    def add_section(self, section: Section):
        '''The section is appended to the order, unless a section with the same
        tag is already present: in that case it's replaced in place.'''
        tag = section.TAG
        section.father = self

        if tag in self.sections:
            logger.warning('section %s is present more than once, the last one wins' % tag.name)
        else:
            self.section_order.append(tag)

        self.sections[tag] = section

        return section

    def unpack(self, stream):
        super().unpack(stream)
        self.read_sections(stream)
        self.resolve_labels()

    def read_sections(self, stream):
        while True:
            peek = stream.peek(4)
            # no more sections is not an error
            if len(peek) < 4:
                break

            try:
                tag = SectionTag(peek)
            except ValueError:
                logger.error('unknown section tag %r at offset 0x%x' % (peek, stream.tell()))
                raise SectionException(peek)

            logger.debug('found section %s at offset 0x%x' % (tag.name, stream.tell()))

            section = SECTIONS[tag](father=self)
            try:
                section.unpack(stream)
            except (UnpackException, ChunkUnpackException) as e:
                e.chain.append(tag.name)
                raise ChunkUnpackException(chain=e.chain, message=str(e.args[0]) if e.args else None)

            self.add_section(section)

    def _find_label(self, label: Union[Label, str]) -> Optional[Label]:
        if isinstance(label, Label):
            return label

        return self.lbl1.get(label) if self.lbl1 is not None else None

    def resolve_labels(self):
        '''Copy into each label the string its index points to, None if the
        index is out of range.'''
        if self.lbl1 is None:
            return

        for label in self.lbl1.labels:
            label.text = self.label_value(label)

    def label_value(self, label: Union[Label, str]) -> Optional[str]:
        label = self._find_label(label)
        if label is None or self.txt2 is None:
            return None

        index = label.index.value
        if index >= len(self.txt2.strings):
            return None

        return self.txt2.strings[index]

    def label_value_raw(self, label: Union[Label, str]) -> Optional[bytes]:
        label = self._find_label(label)
        if label is None or self.txt2 is None:
            return None

        index = label.index.value
        if index >= len(self.txt2.raw_strings):
            return None

        return self.txt2.raw_strings[index]

    def set_label_value(self, label: Union[Label, str], value: str) -> bool:
        '''Change the string pointed by the label: it returns False if the
        label or its string don't exist.'''
        label = self._find_label(label)
        if label is None or self.txt2 is None:
            return False

        index = label.index.value
        if index >= len(self.txt2.strings):
            return False

        self.txt2.set_string(index, value)

        # other labels can point to the same string
        for other in self.lbl1.labels if self.lbl1 is not None else [label]:
            if other.index.value == index:
                other.text = value
        label.text = value

        return True

    def update(self):
        '''Recalculate sizes and counts of all the sections and then of the header.'''
        for tag in self.section_order:
            self.sections[tag].update()

        self.header.section_count.value = len(self.section_order)
        self.header.file_size.value = len(self.pack())

    def _get_size(self):
        return len(self.pack())

    def _get_raw(self):
        return self.pack()

    def pack(self, stream=None):
        if stream is None:
            writer = CountingWriter(io.BytesIO())
            self.pack(writer)
            return writer.getvalue()

        writer = stream if isinstance(stream, CountingWriter) else CountingWriter(stream)

        self.header.pack(writer)
        for tag in self.section_order:
            logger.debug('packing section %s at offset 0x%x' % (tag.name, writer.written))
            self.sections[tag].pack(writer)

    def write_to(self, sink):
        self.pack(sink)

    def save(self, path):
        with open(path, 'wb') as f:
            self.write_to(f)
