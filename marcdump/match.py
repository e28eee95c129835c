"""
Part of marcdump
Copyright (c) 2026 marcdump contributors
MIT License https://opensource.org/licenses/mit-license.php
Code policy PEP8 https://www.python.org/dev/peps/pep-0008/
"""

""" Test a compiled selector against a pymarc record.
A missing field or subfield is a simple "no", never an exception.
"""
import marcdump
from marcdump.selector import SelectorSpec


def _accept(spec, value):
    """A subfield value: empty is absent"""
    if not value:
        return False
    if spec.criterion is None:
        return True
    return spec.criterion.search(value) is not None


def occurrence_codes(spec, field):
    """Subfield codes to look at in this occurrence of a data field"""
    if spec.subfield:
        return [spec.subfield]
    codes = []
    # repeated codes only once, each occurrence has its own set
    for subfield in field.subfields:
        if subfield.code not in codes:
            codes.append(subfield.code)
    return codes


def match_control(spec, field):
    # field is there, an empty value can still match a pattern like ^$
    if spec.criterion is not None:
        return spec.criterion.search(field.data or '') is not None
    return bool(field.data)


def match_data(spec, field):
    for code in occurrence_codes(spec, field):
        for value in field.get_subfields(code):
            if _accept(spec, value):
                return True
    return False


def matches(spec: SelectorSpec, record) -> bool:
    """True if one occurrence of the selected field (and subfield) exists
    with a value, and the value matches the criterion if any.
    Stops at the first good occurrence."""
    if spec.wildcard:
        return True
    if record is None:
        return False
    for field in record.get_fields(spec.field):
        if marcdump.is_control_field(field):
            # subfield ignored for control fields
            if match_control(spec, field):
                return True
        elif match_data(spec, field):
            return True
    return False
