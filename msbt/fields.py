"""
A Field is "fundamental" datatype from the format point of view, something directly
packable/unpackable without need for sub-fields.
"""
import logging
from enum import Enum

from . import byteorder
from .meta import FieldBase, Endianess
from .properties import PropertyDescriptor
from .exceptions import UnpackException, ChunkUnpackException, MagicException


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, field_name=None, father=None, default=None, endianess=None):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self.field_name = field_name
        self.father = father
        self.default = default
        self.offset = None
        self.endianess = endianess

        self.init()

    def init(self):
        self.value = self.value_from_default()

    def value_from_default(self):
        return self.default

    def __str__(self):
        return str(self.value)

    def get_endianess(self) -> Endianess:
        '''The endianess is inherited from the father when not explicitly indicated.'''
        if self.endianess is not None:
            return self.endianess

        if self.father is not None:
            return self.father.get_endianess()

        return Endianess.LITTLE_ENDIAN

    value = property(
        fget=lambda self: self._get_value(),
        fset=lambda self, value: self._set_value(value))

    def _get_value(self):
        return self._value

    def _set_value(self, value) -> None:
        self._value = value

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def _get_raw(self) -> bytes:
        raise NotImplementedError(f"method {self.__class__.__name__}._get_raw() not implemented")

    def _set_raw(self, value) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}._set_raw() not implemented")

    raw = property(
        fget=lambda self: self._get_raw(),
        fset=lambda self, value: self._set_raw(value),
    )

    def pack(self, stream):
        stream.write(self.raw)

    def unpack(self, stream):
        self.offset = stream.tell()
        self.raw = stream.read_exact(self.size)


class StructField(Field):
    """
    Simplest of the fields: integers to/from bytes in the endianess of the
    father chunk.

    The main advantage is the possibility to indicate via the "enum" argument some subclass
    of enum.Enum so to have directly a representation of the integer value of the field itself.
    """

    def __init__(self, format, default=0, enum=None, **kw):
        self.format = format
        self.enum = enum
        super().__init__(default=default, **kw)

    def __repr__(self):
        if not self.enum:
            return '<%s(%s)>' % (self.__class__.__name__, hex(self.value))

        return f'<{self.__class__.__name__}({self.value!r})>'

    def __str__(self):
        width = self.size * 2
        formatter = '0x%%0%dx' % width
        return formatter % (self.value if not self.enum else self.value.value,)

    def value_from_default(self):
        if not self.enum or isinstance(self.default, self.enum):
            return super().value_from_default()

        return self.enum(self.default)

    def _get_size(self):
        return byteorder.calcsize(self.format)

    def _get_raw(self) -> bytes:
        value = self.value if not self.enum else self.value.value
        return byteorder.pack(self.format, value, self.get_endianess())

    def _set_raw(self, raw: bytes) -> None:
        self.value = self._unpack(raw)

    def _unpack_enum(self, value: int) -> Enum:
        try:
            return self.enum(value)
        except ValueError:
            raise UnpackException(chain=[], message=f'enum {self.enum.__name__} doesn\'t have element with value 0x{value:x}')

    def _unpack(self, raw):
        value = byteorder.unpack(self.format, raw, self.get_endianess())
        if self.enum:
            value = self._unpack_enum(value)

        return value


class StringField(Field):
    """Represent a contiguous chunk of bytes.

    The length can be fixed or a Dependency on another field."""

    length = PropertyDescriptor('length', int)

    def __init__(self, n=None, is_magic=False, **kw):
        self.is_magic = is_magic
        if n is None and kw.get('default') is None:
            raise ValueError(f"StringField must have 'n' or 'default' indicated!")

        self.length = n if n is not None else len(kw['default'])

        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, repr(self.value))

    def __len__(self):
        return len(self.value)

    def has_fixed_length(self):
        return not StringField.length.is_dependency(self)

    def value_from_default(self):
        if self.default is not None:
            return self.default

        # without father a dependency cannot be resolved
        return b'\x00' * self.length if self.has_fixed_length() else b''

    def _get_size(self):
        return len(self.value)

    def _set_value(self, value) -> None:
        """The StringField has the size as a parameter and we must follow that indication
        unless it's a Dependency, in that case who changes the value must update it."""
        if not isinstance(value, (bytes, bytearray)):
            raise ValueError(f'{self.__class__.__name__} accepts only binary strings, not {value.__class__.__name__}')

        if self.has_fixed_length() and len(value) != self.length:
            raise ValueError(f'you are trying to set a value with the wrong size (that is {self.length} bytes)')

        super()._set_value(bytes(value))

    def _get_raw(self):
        return self.value

    def _set_raw(self, raw):
        self.value = raw

    def unpack(self, stream):
        self.offset = stream.tell()
        self.raw = stream.read_exact(self.length)

        if self.is_magic and self.value != self.default:
            self.logger.warning('the magic doesn\'t correspond')
            raise MagicException(chain=[], message=f'magic mismatch: {self.value!r}')


class ArrayField(Field):
    '''Un/Pack an array of fields.

    You indicate the number of elements via the parameter named "n", it can
    be an integer or a Dependency. The "field" parameter is the prototype
    for the elements.

    This class must behave like a list in python, obviously cannot implement all the methods
    since, for example, slicing what should mean?
    '''
    n = PropertyDescriptor('n', int)

    def __init__(self, field, n=0, **kw):
        self.field = field
        self.n = n

        super().__init__(**kw)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.value!r})>'

    def __getitem__(self, item):
        return self.value[item]

    def __len__(self):
        return len(self.value)

    def __iter__(self):
        return iter(self.value)

    def value_from_default(self):
        if ArrayField.n.is_dependency(self):
            return []

        return [self.instance_element() for _ in range(self.n)]

    def _set_value(self, value):
        for element in value:
            element.father = self

        super()._set_value(list(value))

    def _get_raw(self):
        return b''.join(element.raw for element in self.value)

    def _get_size(self):
        return sum(element.size for element in self.value)

    def instance_element(self):
        return self.field.create(father=self)  # pass the father so that we don't lose the hierarchy

    def append(self, element):
        element.father = self
        self.value.append(element)

    def pack(self, stream):
        for element in self.value:
            element.pack(stream)

    def unpack(self, stream):
        self.offset = stream.tell()
        n = self.n
        self.logger.debug('unpacking %d elements for \'%s\'' % (n, self.field_name))

        elements = []
        for idx in range(n):
            element = self.instance_element()
            try:
                element.unpack(stream)
            except (UnpackException, ChunkUnpackException) as e:
                e.chain.append(idx)
                raise ChunkUnpackException(chain=e.chain, message=str(e.args[0]) if e.args else None)
            elements.append(element)

        self.value = elements