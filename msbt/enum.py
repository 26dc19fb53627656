from enum import Enum


class Encoding(Enum):
    '''Text encoding of the strings stored in the TXT2 section'''
    UTF8  = 0x00
    UTF16 = 0x01


class SectionTag(Enum):
    '''The 4-bytes tags identifying the sections we know about'''
    LBL1 = b'LBL1'
    NLI1 = b'NLI1'
    ATO1 = b'ATO1'
    ATR1 = b'ATR1'
    TSY1 = b'TSY1'
    TXT2 = b'TXT2'
