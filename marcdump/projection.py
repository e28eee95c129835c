"""
Part of marcdump
Copyright (c) 2026 marcdump contributors
MIT License https://opensource.org/licenses/mit-license.php
Code policy PEP8 https://www.python.org/dev/peps/pep-0008/
"""

""" Which fields of a selected record to show, from "-f 245:650:700".
A filter on the record, the record order wins over the list order.
"""
from dataclasses import dataclass
from typing import Tuple

import marcdump


@dataclass(frozen=True)
class FieldProjection:
    tags: Tuple[str, ...] = ()

    def __bool__(self):
        return len(self.tags) > 0

    def __contains__(self, tag):
        return tag in self.tags


def parse_projection(text):
    """Split a colon separated list of tags, empty items are skipped.
    A tag no field has, ex: "65", just selects nothing."""
    if not text:
        return FieldProjection()
    tags = []
    for tag in text.split(':'):
        tag = tag.strip()
        if tag == '':
            continue
        if tag not in tags:
            tags.append(tag)
    return FieldProjection(tuple(tags))


def project(record, projection=None):
    """Yield (tag, is_control, field) for the fields to render,
    one item per occurrence, in record order."""
    for field in record.fields:
        if projection and field.tag not in projection:
            continue
        yield field.tag, marcdump.is_control_field(field), field
