import pytest

from msbt.core import Chunk
from msbt.exceptions import ChunkUnpackException
from msbt.fields import StructField, StringField, ArrayField
from msbt.meta import Endianess
from msbt.properties import Dependency


def test_chunk():
    """Check that building a Chunk from fields behaves correctly."""
    class Dummy(Chunk):
        a = StructField('I', default=0xbad)
        b = StringField(0x10)
        c = StructField('I', default=0xdeadbeef)

    dummy = Dummy()

    assert dummy.a.size == 4
    assert dummy.a.raw == b'\xad\x0b\x00\x00'
    assert dummy.a.value == 0xbad
    assert dummy.a.father == dummy

    assert dummy.b.size == 0x10
    assert dummy.b.raw == b'\x00' * 0x10

    assert dummy.c.size == 0x4
    assert dummy.c.raw == b'\xef\xbe\xad\xde'

    assert dummy.size == 0x18
    assert len(dummy.raw) == dummy.size
    assert dummy.raw == (
        b'\xad\x0b\x00\x00' +
        b'\x00' * 0x10 +
        b'\xef\xbe\xad\xde'
    )

    other = Dummy(dummy.raw)

    assert other.a.offset == 0x00
    assert other.b.offset == 0x04
    assert other.c.offset == 0x14
    assert other.c.value == 0xdeadbeef


def test_instances_do_not_share_fields():
    class Dummy(Chunk):
        a = StructField('I')

    first = Dummy()
    second = Dummy()

    first.a.value = 1

    assert second.a.value == 0
    assert first.a is not second.a


def test_chunk_w_dependencies():
    class Example(Chunk):
        sz = StructField('I')
        data = StringField(Dependency('.sz'))
        extra = StructField('H')

    example = Example(b'\x05\x00\x00\x00kebab\x0a\x0b')

    assert example.sz.value == 5
    assert example.data.value == b'kebab'
    assert example.data.offset == 4
    assert example.extra.value == 0x0b0a
    assert example.extra.offset == 9

    assert example.pack() == b'\x05\x00\x00\x00kebab\x0a\x0b'


def test_dependency_on_method():
    class Example(Chunk):
        count = StructField('B')
        items = ArrayField(StructField('B'), n=Dependency('.double'))

        def double(self):
            return self.count.value * 2

    example = Example(b'\x02\x01\x02\x03\x04')

    assert [_.value for _ in example.items] == [1, 2, 3, 4]


def test_inheritance():
    '''subclasses inherit fields'''
    class Father(Chunk):
        field_a = StringField(0x10)
        field_b = StructField('I')

    class Son(Father):
        field_c = StringField(0x08)

    field_b_value = b'\x01\x02\x03\x04'
    field_c_value = b'ABCDEFGH'
    son = Son(b'A' * 16 + field_b_value + field_c_value)

    assert [name for name, _ in son.get_fields()] == [
        'field_a', 'field_b', 'field_c',
    ]

    assert son.field_b.value == 0x04030201
    assert son.field_c.value == field_c_value


def test_redefine_field():
    class Father(Chunk):
        field_a = StructField('I')

    with pytest.raises(AttributeError):
        class Son(Father):
            field_a = StructField('H')


def test_endianess_is_inherited():
    class Inner(Chunk):
        value_h = StructField('H')

    class Outer(Chunk):
        inner = Inner()

    outer = Outer(b'\x12\x34', endianess=Endianess.BIG_ENDIAN)

    assert outer.inner.value_h.value == 0x1234
    assert outer.inner.father is outer


def test_unpacking_and_packing():
    class Dummy(Chunk):
        fieldA = StructField('I')
        fieldB = StructField('I')

    contents = b'\x01\x02\x03\x04\x0a\x0b\x0c\x0d'

    dummy = Dummy(contents)

    assert dummy.pack() == contents


def test_unpack_chain():
    class Inner(Chunk):
        a = StructField('I')

    class Outer(Chunk):
        inner = Inner()
        items = ArrayField(Inner(), n=2)

    with pytest.raises(ChunkUnpackException) as excinfo:
        Outer(b'\x00' * 10)

    assert excinfo.value.chain == ['a', 1, 'items']
