import struct

import pytest


PADDING = b'\xab'


def codec(endian, encoding):
    if encoding == 0:
        return 'utf-8'

    return 'utf-16-le' if endian == '<' else 'utf-16-be'


def build_header(endian='<', encoding=1, section_count=0, file_size=0, bom=None, magic=b'MsgStdBn'):
    if bom is None:
        bom = b'\xff\xfe' if endian == '<' else b'\xfe\xff'

    return (
        magic
        + bom
        + struct.pack(endian + 'H', 0)
        + bytes([encoding, 0])
        + struct.pack(endian + 'HHI', section_count, 0, file_size)
        + b'\x00' * 10
    )


def build_section(tag, payload, endian='<'):
    padding = -len(payload) % 16
    return tag + struct.pack(endian + 'I', len(payload)) + b'\x00' * 8 + payload + PADDING * padding


def build_lbl1(groups, endian='<'):
    '''groups is a list of lists of (name, index)'''
    payload = struct.pack(endian + 'I', len(groups))
    labels = b''
    offset = 4 + 8 * len(groups)
    for group in groups:
        payload += struct.pack(endian + 'II', len(group), offset)
        for name, index in group:
            entry = bytes([len(name)]) + name.encode() + struct.pack(endian + 'I', index)
            labels += entry
            offset += len(entry)

    return payload + labels


def build_txt2(strings, endian='<', encoding=1):
    raw = [_.encode(codec(endian, encoding)) for _ in strings]
    payload = struct.pack(endian + 'I', len(raw))
    offset = 4 + 4 * len(raw)
    for data in raw:
        payload += struct.pack(endian + 'I', offset)
        offset += len(data)

    return payload + b''.join(raw)


def build_nli1(pairs, endian='<'):
    '''pairs is a list of (value, key) in the order they must appear'''
    if not pairs:
        return b''

    payload = struct.pack(endian + 'I', len(pairs))
    for value, key in pairs:
        payload += struct.pack(endian + 'II', value, key)

    return payload


def build_atr1(entries, entry_size, endian='<'):
    return struct.pack(endian + 'II', len(entries), entry_size) + b''.join(entries)


def build_file(sections, endian='<', encoding=1):
    '''sections is a list of (tag, payload)'''
    body = b''.join(build_section(tag, payload, endian=endian) for tag, payload in sections)
    file_size = 0x20 + len(body)

    return build_header(endian=endian, encoding=encoding, section_count=len(sections), file_size=file_size) + body


SAMPLE_STRINGS = ['hi\x00', '', 'h\xe9llo \U0001f600\x00', 'bye\x00']
SAMPLE_GROUPS = [
    [('A', 0)],
    [],
    [('B', 1), ('Long_label_name', 2)],
    [('Dup', 0)],
]


@pytest.fixture
def sample_sections():
    return [
        (b'LBL1', build_lbl1(SAMPLE_GROUPS)),
        (b'NLI1', build_nli1([(9, 1), (7, 3)])),
        (b'ATO1', b'\xff' * 13),
        (b'ATR1', build_atr1([b'\x01\x02\x03\x04', b'\x05\x06\x07\x08', b'\x09\x0a\x0b\x0c'], 4)),
        (b'TSY1', b'\x00\x01\x02\x03' * 5),
        (b'TXT2', build_txt2(SAMPLE_STRINGS)),
    ]


@pytest.fixture
def sample_data(sample_sections):
    return build_file(sample_sections)


@pytest.fixture
def minimal_data():
    '''A single label named "A" pointing to the string "hi".'''
    return build_file([
        (b'LBL1', build_lbl1([[('A', 0)]])),
        (b'TXT2', build_txt2(['hi'])),
    ])
