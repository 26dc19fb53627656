#!/usr/bin/env python3
import sys
import os
import logging

from msbt import MsbtFile

logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)


def usage(progname):
    print('usage: %s <msbt file>' % progname)
    sys.exit(1)


def dump_header(hdr):
    print(f'''MSBT Header:
  Magic:                             {hdr.magic.value.decode('latin1')}
  Byte order:                        {hdr.byte_order.name}
  Encoding:                          {hdr.encoding.value.name}
  Number of sections:                {hdr.section_count.value}
  File size:                         {hdr.file_size.value} (bytes)''')


def dump_sections(msbt):
    print('''Sections:
  [Nr] Tag   Size''')
    for idx, tag in enumerate(msbt.section_order):
        section = msbt.get_section(tag)
        print(f'''  [{idx: >2d}] {tag.name}  0x{section.payload_size:08x}''')


def dump_labels(msbt):
    print('''Labels:
  Group  Index  Name                             Value''')
    for label in msbt.lbl1.labels:
        print(f'''  {label.checksum: >5d}  {label.index.value: >5d}  {label.name:<32} {label.text!r}''')


if __name__ == '__main__':
    if len(sys.argv) < 2:
        usage(sys.argv[0])

    msbt = MsbtFile(sys.argv[1])

    dump_header(msbt.header)
    dump_sections(msbt)

    if msbt.lbl1 is not None:
        dump_labels(msbt)
