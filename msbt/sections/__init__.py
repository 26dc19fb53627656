from ..enum import SectionTag
from .base import Section, SectionFrame, PADDING_CHAR, PADDING_ALIGNMENT
from .lbl1 import LabelSection, Label, Group
from .nli1 import NameListSection, GlobalId
from .opaque import BlobSection, AttributeOrderSection, AttributeSection, TypeSystemSection
from .txt2 import TextSection


SECTIONS = {
    SectionTag.LBL1: LabelSection,
    SectionTag.NLI1: NameListSection,
    SectionTag.ATO1: AttributeOrderSection,
    SectionTag.ATR1: AttributeSection,
    SectionTag.TSY1: TypeSystemSection,
    SectionTag.TXT2: TextSection,
}
