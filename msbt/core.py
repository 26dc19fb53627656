"""
Core module for the abstraction of a file format

"""
import io
from typing import Tuple, List

from .fields import Field
from .meta import MetaChunk
from .streams import Stream, CountingWriter
from .exceptions import (
    ChunkUnpackException,
    UnpackException,
)


class Chunk(Field, metaclass=MetaChunk):
    """
    Together with Field is the main class that defines a format: its main attributes
    are offset and size that identify a Chunk.

    A Chunk can contain sub-chunks, they are declared as class attributes and
    are un/packed in order of declaration.

    If a source (a path, some bytes or a seekable file object) is passed to the
    constructor, the chunk is unpacked from it.
    """

    def __init__(self, source=None, **kwargs):
        super().__init__(**kwargs)

        # now we have setup all the fields necessary and we can unpack if
        # some data is passed with the constructor
        if source is not None:
            self.logger.debug('unpacking \'%s\' from %s' % (self.__class__.__name__, source.__class__.__name__))
            stream = source if isinstance(source, Stream) else Stream(source)
            try:
                self.unpack(stream)
            finally:
                if stream is not source:
                    stream.close()

    def get_ordered_fields_name(self) -> List[str]:
        return self._meta.fields

    def get_fields(self) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, instance) for each field.'''
        return [(_, getattr(self, _)) for _ in self.get_ordered_fields_name()]

    def is_present(self, field_name) -> bool:
        '''Override to make a field conditional on the value of other fields.'''
        return True

    def get_present_fields(self) -> List[Tuple[str, Field]]:
        return [(_, getattr(self, _)) for _ in self.get_ordered_fields_name() if self.is_present(_)]

    def __repr__(self):
        msg = []
        for field_name, field in self.get_fields():
            msg.append('%s=%s' % (field_name, repr(field)))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __str__(self):
        msg = ''
        for field_name, field in self.get_fields():
            msg += '%s: %s\n' % (field_name, repr(field))
        return msg

    def init(self):
        for _, field in self.get_fields():
            field.init()

    def _get_size(self):
        '''the size parameter MUST not be set but MUST be derived from the subchunks'''
        return sum(field.size for _, field in self.get_present_fields())

    def _get_raw(self):
        return b''.join(field.raw for _, field in self.get_present_fields())

    def _set_raw(self, value):
        self.unpack(Stream(value))

    def pack(self, stream=None):
        '''Encode the chunk into the stream, if no stream is passed a new one
        is created and its contents are returned.'''
        writer = CountingWriter(io.BytesIO()) if stream is None else stream

        for field_name, field_instance in self.get_present_fields():
            self.logger.debug('packing %s.%s' % (self.__class__.__name__, field_name))
            field_instance.pack(writer)

        return writer.getvalue() if stream is None else None

    def unpack(self, stream):
        '''This is one of the main APIs to take care of: its aim is to take a binary
        data and transform in the representation given by the class this method
        is implemented.

        Passing a stream is mandatory since is possible that the different
        sub-chunks need to peek ahead and to jump back.
        '''
        self.offset = stream.tell()

        for field_name, field in self.get_fields():
            if not self.is_present(field_name):
                continue

            self.logger.debug('unpacking %s.%s at offset %d' % (self.__class__.__name__, field_name, stream.tell()))

            try:
                field.unpack(stream)
            except (UnpackException, ChunkUnpackException) as e:
                e.chain.append(field_name)
                raise ChunkUnpackException(chain=e.chain, message=str(e.args[0]) if e.args else None)
