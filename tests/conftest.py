"""
Pytest fixtures, MARC records built in memory with pymarc.
"""

import pytest
from pymarc import Field, Record, Subfield


def control(tag, data):
    return Field(tag=tag, data=data)


def data(tag, indicators=(' ', ' '), *subfields):
    """data('650', (' ', '0'), ('a', 'Fiction'), ('x', 'History'))"""
    return Field(
        tag=tag,
        indicators=list(indicators),
        subfields=[Subfield(code=code, value=value) for code, value in subfields],
    )


def make_record(*fields):
    record = Record()
    for f in fields:
        record.add_field(f)
    return record


def write_marc(path, records):
    with open(path, 'wb') as handle:
        for r in records:
            handle.write(r.as_marc())
    return path


@pytest.fixture
def book():
    """A record with repeated data fields"""
    return make_record(
        control('001', 'ocm00012345'),
        control('008', '210101s2021    nyu           000 0 eng d'),
        data('020', (' ', ' '), ('a', '0743264746'), ('q', 'paperback')),
        data('020', (' ', ' '), ('q', 'hardcover'), ('a', '9780743264747')),
        data('245', ('1', '0'), ('a', 'The sun also rises /'), ('c', 'Ernest Hemingway.')),
        data('650', (' ', '0'), ('a', 'Fiction')),
        data('650', (' ', '0'), ('a', 'Paris (France)'), ('v', 'Fiction.')),
        data('700', ('1', ' '), ('a', 'Scribner, Charles.')),
    )


@pytest.fixture
def two_records_file(tmp_path):
    """Record 1 with a 001, record 2 with a 020 and a 650"""
    first = make_record(control('001', 'abc'))
    second = make_record(
        control('001', 'def'),
        data('020', (' ', ' '), ('a', '9780743264747')),
        data('650', (' ', '0'), ('a', 'Fiction')),
    )
    return write_marc(tmp_path / 'two.mrc', [first, second])


@pytest.fixture
def three_matching_file(tmp_path):
    records = [
        make_record(control('001', f'rec{i}'), data('245', ('0', '0'), ('a', f'Title {i}')))
        for i in range(1, 4)
    ]
    return write_marc(tmp_path / 'three.mrc', records)
