"""
# MSBT file format ORM.

MsgStdBn files contain the localized messages of a game: a set of labels,
each one pointing to a string, plus some sections describing attributes
of the messages that we don't fully understand.

Two basic main operations are defined for the file format and its sub components:

 1. unpack(): reading the binary data and build a high-level representation of that.
    The offset used is the actual offset of the stream and the chunk itself
    knows how many bytes needs to read to finalize the representation

 2. pack(): encode the high-level representation into binary data.

The sections we don't modify are written back byte for byte; the ones we
modify recalculate their sizes and offsets with update().

    >>> from msbt import MsbtFile
    >>> msbt = MsbtFile('message.msbt')
    >>> msbt.set_label_value('greeting', 'hello\\x00')
    True
    >>> msbt.save('message.msbt-new')
"""
from .document import MsbtFile
from .header import Header, MAGIC
from .enum import Encoding, SectionTag
from .meta import Endianess
from .sections import (
    LabelSection,
    NameListSection,
    AttributeOrderSection,
    AttributeSection,
    TypeSystemSection,
    TextSection,
    Label,
    Group,
)
from .exceptions import (
    MsbtException,
    UnpackException,
    ChunkUnpackException,
    MagicException,
    BomException,
    EncodingException,
    TextDecodeException,
    Utf8DecodeException,
    Utf16DecodeException,
    SectionException,
)
