"""
Part of marcdump
Copyright (c) 2026 marcdump contributors
MIT License https://opensource.org/licenses/mit-license.php
Code policy PEP8 https://www.python.org/dev/peps/pep-0008/
"""

""" Selector expressions, compiled once at start.

    245          records with a 245 field
    020_a        records with a 020 field having a $a
    020_a=^978   same, with a $a value matching the regex
    001=^ocm     control field 001 matching the regex
    (empty)      every record
"""
import re
from dataclasses import dataclass
from typing import Optional, Pattern

from marcdump.errors import InvalidSelectorSpec, PatternCompileError

# FIELD ['_' SUBFIELD] ['=' PATTERN], pattern is the rest of the string
SELECTOR_RE = re.compile(r'([0-9A-Za-z]{3})(?:_([0-9a-z]))?(?:=(.+))?', re.DOTALL)


@dataclass(frozen=True)
class SelectorSpec:
    field: str = ''
    subfield: str = ''
    criterion: Optional[Pattern] = None

    @property
    def wildcard(self) -> bool:
        return not self.field

    def __str__(self):
        if self.wildcard:
            return '*'
        text = self.field
        if self.subfield:
            text += '_' + self.subfield
        if self.criterion is not None:
            text += '=' + self.criterion.pattern
        return text


def parse_selector(text: str) -> SelectorSpec:
    """Compile a selector, raise InvalidSelectorSpec or PatternCompileError"""
    if text is None or text == '':
        return SelectorSpec()
    found = SELECTOR_RE.fullmatch(text)
    if found is None:
        raise InvalidSelectorSpec(text)
    field, subfield, pattern = found.groups()
    criterion = None
    if pattern is not None:
        try:
            criterion = re.compile(pattern)
        except re.error as e:
            raise PatternCompileError(pattern, e) from e
    return SelectorSpec(field, subfield or '', criterion)
