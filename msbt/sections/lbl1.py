'''
# LBL1: the labels

The labels are distributed in groups by a hash of their name, the section
contains the groups and then all the labels, one group after the other:

    uint32 number of groups
    groups:
        uint32 number of labels in the group
        uint32 offset of the first label of the group
    labels:
        uint8  length of the name
        char[] name
        uint32 index of the string in TXT2

We never compute the hash: the groups are kept as they are found and the
labels stay in the order they are read. The offsets of the groups are
preserved as read, they are recalculated only when a group or a label is
added.
'''
from .base import Section
from .. import fields
from ..core import Chunk
from ..enum import SectionTag
from ..properties import Dependency
from ..exceptions import Utf8DecodeException


LABEL_MAX_LENGTH = 0xff


class Group(Chunk):
    label_count  = fields.StructField('I')
    label_offset = fields.StructField('I')


class Label(Chunk):
    '''The checksum is the index of the group the label was read from, the
    text is the string the index points to (filled by the file once the
    strings are available).'''
    name_length = fields.StructField('B')
    name_raw    = fields.StringField(Dependency('.name_length'))
    index       = fields.StructField('I')

    def __init__(self, source=None, name=None, index=0, checksum=0, **kwargs):
        self.checksum = checksum
        self.text = None
        super().__init__(source, **kwargs)

        if source is None:
            self.index.value = index
            if name is not None:
                self.set_name(name)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.name_raw.value!r}, index={self.index.value}, checksum={self.checksum})>'

    @property
    def name(self) -> str:
        try:
            return self.name_raw.value.decode('utf-8')
        except UnicodeDecodeError as e:
            raise Utf8DecodeException(e)

    def set_name(self, name: str):
        raw = name.encode('utf-8')
        if len(raw) > LABEL_MAX_LENGTH:
            raise ValueError(f'label names can be at most {LABEL_MAX_LENGTH} bytes long, \'{name}\' is {len(raw)}')

        self.name_raw.value = raw
        self.name_length.value = len(raw)

    def unpack(self, stream):
        super().unpack(stream)
        self.name  # the name must be valid UTF-8


class LabelSection(Section):
    TAG = SectionTag.LBL1

    group_count = fields.StructField('I')
    groups      = fields.ArrayField(Group(), n=Dependency('.group_count'))
    labels      = fields.ArrayField(Label(), n=Dependency('.total_label_count'))

    def total_label_count(self) -> int:
        return sum(group.label_count.value for group in self.groups)

    def unpack_payload(self, stream):
        labels = iter(self.labels)
        for idx, group in enumerate(self.groups):
            for _ in range(group.label_count.value):
                next(labels).checksum = idx

    def get(self, name):
        '''Returns the first label with the given name or None.'''
        for label in self.labels:
            if label.name == name:
                return label

        return None

    def get_group_labels(self, group_index):
        return [label for label in self.labels if label.checksum == group_index]

    def _relocate_groups(self):
        offset = self.group_count.size + len(self.groups) * 8
        labels = iter(self.labels)
        for group in self.groups:
            group.label_offset.value = offset
            for _ in range(group.label_count.value):
                offset += next(labels).size

    def add_group(self):
        self.groups.append(self.groups.instance_element())
        self._relocate_groups()
        self.update()

        return len(self.groups) - 1

    def add_label(self, name, index, group_index):
        '''The label is appended at the end of the indicated group: the caller
        decides the group, no hashing is done here.'''
        if not 0 <= group_index < len(self.groups):
            raise IndexError(f'there is no group with index {group_index}')

        label = self.labels.instance_element()
        label.set_name(name)
        label.index.value = index
        label.checksum = group_index

        position = sum(group.label_count.value for group in self.groups[:group_index + 1])
        label.father = self.labels
        self.labels.value.insert(position, label)

        group = self.groups[group_index]
        group.label_count.value = group.label_count.value + 1

        self._relocate_groups()
        self.update()

        return label

    def update(self):
        self.group_count.value = len(self.groups)
        self.payload_size = self.group_count.size + self.groups.size + self.labels.size
