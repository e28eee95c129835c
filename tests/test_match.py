from pymarc import Record

from conftest import control, data, make_record
from marcdump.match import matches, occurrence_codes
from marcdump.selector import parse_selector


def test_wildcard_matches_everything(book):
    assert matches(parse_selector(''), book)
    assert matches(parse_selector(''), Record())


def test_absent_field():
    assert not matches(parse_selector('245'), Record())
    assert not matches(parse_selector('001'), Record())


def test_control_presence(book):
    assert matches(parse_selector('001'), book)
    assert not matches(parse_selector('003'), book)


def test_control_criterion_is_a_search(book):
    assert matches(parse_selector('001=12345'), book)
    assert matches(parse_selector('001=^ocm'), book)
    assert not matches(parse_selector('001=^12345'), book)


def test_control_ignores_subfield(book):
    assert matches(parse_selector('001_a=ocm'), book)


def test_control_empty_value():
    record = make_record(control('001', ''))
    assert not matches(parse_selector('001'), record)


def test_control_empty_value_with_pattern():
    record = make_record(control('001', ''))
    assert matches(parse_selector('001=^$'), record)
    assert not matches(parse_selector('001=.'), record)
    assert not matches(parse_selector('003=^$'), record)


def test_data_presence(book):
    assert matches(parse_selector('245'), book)
    assert matches(parse_selector('245_c'), book)
    assert not matches(parse_selector('245_b'), book)
    assert not matches(parse_selector('100'), book)


def test_data_any_subfield(book):
    assert matches(parse_selector('245=Hemingway'), book)
    assert not matches(parse_selector('245=Faulkner'), book)


def test_data_later_occurrence(book):
    # only the second 020 has the ISBN-13
    assert matches(parse_selector('020_a=^978'), book)
    # only the second 650 has a $v
    assert matches(parse_selector('650_v=Fiction'), book)


def test_subfield_scope(book):
    # "hardcover" is in $q, not in $a
    assert matches(parse_selector('020_q=hardcover'), book)
    assert not matches(parse_selector('020_a=hardcover'), book)


def test_codes_per_occurrence():
    first = data('650', (' ', '0'), ('a', 'Novels'))
    second = data('650', (' ', '0'), ('x', 'Criticism'), ('z', 'France'))
    record = make_record(first, second)
    assert matches(parse_selector('650=France'), record)
    spec = parse_selector('650')
    assert occurrence_codes(spec, first) == ['a']
    assert occurrence_codes(spec, second) == ['x', 'z']


def test_repeated_code_in_occurrence():
    field = data('650', (' ', '0'), ('a', 'One'), ('a', 'Two'))
    record = make_record(field)
    assert occurrence_codes(parse_selector('650'), field) == ['a']
    assert matches(parse_selector('650_a=Two'), record)


def test_empty_subfield_value_is_absent():
    record = make_record(data('500', (' ', ' '), ('a', '')))
    assert not matches(parse_selector('500_a'), record)
    assert not matches(parse_selector('500'), record)


def test_same_answer_twice(book):
    spec = parse_selector('650_a=Paris')
    assert matches(spec, book) == matches(spec, book) is True


def test_any_position_of_n_occurrences():
    for k in range(5):
        fields = [data('700', ('1', ' '), ('a', f'Author {i}')) for i in range(5)]
        record = make_record(*fields)
        assert matches(parse_selector(f'700_a=Author {k}$'), record)
    assert not matches(parse_selector('700_a=Author 5'), record)


def test_none_record():
    assert not matches(parse_selector('245'), None)
