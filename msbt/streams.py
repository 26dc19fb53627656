import io
import logging
import os

from .exceptions import UnpackException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/file objects to
    uniform its properties: mainly we need to have a seekable object
    from which reading exactly a given amount of bytes.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self.obj = os.fspath(obj) if isinstance(obj, os.PathLike) else obj
        self.history = []
        self._owned = False

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, self.init_fileobj)

        init_method()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        self.obj = open(self.obj, 'rb')
        self._owned = True

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    init_bytearray = init_bytes
    init_memoryview = init_bytes

    def init_fileobj(self):
        if not (hasattr(self.obj, 'read') and hasattr(self.obj, 'seek')):
            raise ValueError('\'%s\' is not a seekable stream' % self.obj.__class__.__name__)

    def close(self):
        '''Only the file we opened is closed, the caller owns the others.'''
        if self._owned:
            self.obj.close()

    def seek(self, offset, whence=os.SEEK_SET):
        return self.obj.seek(offset, whence)

    def read_exact(self, n):
        data = self.obj.read(n)
        if len(data) != n:
            logger.debug('short read at offset %d: wanted %d bytes, got %d' % (self.tell(), n, len(data)))
            raise UnpackException(chain=[], message=f'unexpected end of stream (wanted {n} bytes, got {len(data)})')

        return data

    def peek(self, n):
        '''Returns at most n bytes without moving the position.'''
        self.save()
        data = self.obj.read(n)
        self.restore()

        return data

    def read_all(self):
        return self.obj.read()

    def skip_padding(self, filler, block=16):
        '''Move past a run of filler bytes, stopping at the first byte that is not
        filler (or at the end of the stream).'''
        while True:
            data = self.obj.read(block)
            if not data:
                return

            for idx, value in enumerate(data):
                if value != filler:
                    self.obj.seek(idx - len(data), os.SEEK_CUR)
                    return

    def write(self, data):
        return self.obj.write(data)

    def save(self):
        self.history.append(self.obj.tell())

    def restore(self):
        old_seek = self.history.pop()
        self.obj.seek(old_seek)


class CountingWriter(object):
    '''Wraps a writable sink and keeps track of how many bytes went through it,
    so that the alignment of the output is known without seeking.'''

    def __init__(self, sink, written=0):
        self.sink = sink
        self.written = written

    def write(self, data):
        self.sink.write(data)
        self.written += len(data)

        return len(data)

    def padding_length(self, alignment):
        remainder = self.written % alignment

        return alignment - remainder if remainder else 0

    def align(self, alignment, filler):
        '''Pads with the filler byte up to the next multiple of alignment.'''
        length = self.padding_length(alignment)
        if length:
            self.write(bytes([filler]) * length)

        return length

    def getvalue(self):
        return self.sink.getvalue()
