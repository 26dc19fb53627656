'''
# NLI1: global ids

    uint32 number of entries
    entries:
        uint32 value
        uint32 key

Note the order of the pair on disk, the value comes first. In memory the
entries are a mapping ordered by key, so they are written back ordered by
key and not in the order they were found.

A section with an empty payload doesn't even have the number of entries.
'''
import logging

from .base import Section
from .. import fields
from ..core import Chunk
from ..enum import SectionTag
from ..properties import Dependency


logger = logging.getLogger(__name__)


class GlobalId(Chunk):
    id_value = fields.StructField('I')
    id_key   = fields.StructField('I')


class NameListSection(Section):
    TAG = SectionTag.NLI1

    id_count = fields.StructField('I')
    entries  = fields.ArrayField(GlobalId(), n=Dependency('.id_count'))

    def __init__(self, source=None, **kwargs):
        self.global_ids = {}
        super().__init__(source, **kwargs)

    def is_present(self, field_name):
        return field_name == 'frame' or self.payload_size > 0

    def unpack_payload(self, stream):
        self.global_ids = {}
        for entry in self.entries:
            key = entry.id_key.value
            if key in self.global_ids:
                logger.warning('duplicated global id key %d, the last one wins' % key)
            self.global_ids[key] = entry.id_value.value

        self.global_ids = dict(sorted(self.global_ids.items()))

        # the merged entries must not be written with the count found on disk
        if len(self.global_ids) != self.id_count.value:
            self.update()

    def pack(self, stream=None):
        self._sync_entries()
        return super().pack(stream)

    def _sync_entries(self):
        entries = []
        for key, value in sorted(self.global_ids.items()):
            entry = self.entries.instance_element()
            entry.id_key.value = key
            entry.id_value.value = value
            entries.append(entry)

        self.entries.value = entries

    def get(self, key, default=None):
        return self.global_ids.get(key, default)

    def set(self, key, value):
        self.global_ids[key] = value
        self.global_ids = dict(sorted(self.global_ids.items()))
        self.update()

    def remove(self, key):
        del self.global_ids[key]
        self.update()

    def update(self):
        self.id_count.value = len(self.global_ids)
        self.payload_size = 0 if not self.global_ids else self.id_count.size + len(self.global_ids) * 8
