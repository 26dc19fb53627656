'''
Conversion between the encoded bytes of a message and python strings.

NOTE: messages can contain control sequences (colors, pauses, variables...)
      whose parameters are binary data; they are not parsed here, so they
      pass through the decoding as whatever characters their code units
      happen to represent. Decoding and then encoding such a string is not
      guaranteed to give back the original bytes: keep the raw bytes around
      if you need them untouched.
'''
from .enum import Encoding
from .meta import Endianess
from .exceptions import Utf8DecodeException, Utf16DecodeException


def get_codec(encoding: Encoding, endianess: Endianess) -> str:
    if encoding == Encoding.UTF8:
        return 'utf-8'

    return 'utf-16-be' if endianess == Endianess.BIG_ENDIAN else 'utf-16-le'


def decode(raw: bytes, encoding: Encoding, endianess: Endianess) -> str:
    codec = get_codec(encoding, endianess)

    if encoding == Encoding.UTF8:
        try:
            return raw.decode(codec)
        except UnicodeDecodeError as e:
            raise Utf8DecodeException(e)

    # a dangling byte is not part of any code unit
    raw = raw[:len(raw) - len(raw) % 2]
    try:
        return raw.decode(codec)
    except UnicodeDecodeError as e:
        raise Utf16DecodeException(e)


def encode(value: str, encoding: Encoding, endianess: Endianess) -> bytes:
    '''Code points outside the basic plane become surrogate pairs for UTF-16.'''
    return value.encode(get_codec(encoding, endianess))
