class MsbtException(Exception):
    '''Base class to extend in order to throw exception in msbt.

    It takes a single argument that represents the chain of the layer that
    caused the exception.
    '''

    def __init__(self, chain=None, message=None):
        self.chain = chain if chain is not None else []
        super().__init__(*([message] if message else []))

    def __str__(self):
        msg = super().__str__()
        if self.chain:
            # the chain is built from the innermost field outward
            return '%s (at %s)' % (msg, '.'.join(str(_) for _ in reversed(self.chain)))

        return msg


class UnpackException(MsbtException):
    pass


class ChunkUnpackException(MsbtException):
    pass


class MagicException(MsbtException):
    pass


class BomException(MsbtException):
    '''The byte-order mark is neither big nor little endian.'''

    def __init__(self, bom, chain=None):
        self.bom = bom
        super().__init__(chain=chain, message=f'invalid byte order mark {bom!r}')


class EncodingException(MsbtException):

    def __init__(self, value, chain=None):
        self.value = value
        super().__init__(chain=chain, message=f'invalid encoding 0x{value:02x}')


class TextDecodeException(MsbtException):
    '''Wraps the UnicodeDecodeError raised decoding a string.'''
    encoding = None

    def __init__(self, detail, chain=None):
        self.detail = detail
        super().__init__(chain=chain, message=f'invalid {self.encoding}: {detail}')


class Utf8DecodeException(TextDecodeException):
    encoding = 'UTF-8'


class Utf16DecodeException(TextDecodeException):
    encoding = 'UTF-16'


class SectionException(MsbtException):
    '''This is raised when the tag of a section is unknown, it's not possible
    to skip it since the size is not trusted.'''

    def __init__(self, tag, chain=None):
        self.tag = tag
        super().__init__(chain=chain, message=f'invalid section {tag!r}')
