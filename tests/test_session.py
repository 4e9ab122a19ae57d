import pytest

from hashcache.operations import Operation
from hashcache.session import DictionarySession, SessionError


@pytest.fixture
def session():
    return DictionarySession()


def test_add_records_stores_pairs(session):
    session.add_records("alpha one\nbeta two\ngamma three")
    assert len(session.dictionary) == 3
    assert session.lookup("alpha") == "one"
    assert session.lookup("beta") == "two"
    assert session.lookup("gamma") == "three"


def test_add_records_records_row(session):
    row = session.add_records("alpha one\nbeta two")
    assert row.operation is Operation.ADD
    assert row.size == 2
    assert row.time >= 0
    assert len(session.table) == 1
    assert session.table.cell(0, 0) == "Add"


def test_add_invalid_format_adds_nothing(session):
    with pytest.raises(SessionError, match="wrong format"):
        session.add_records("alpha one\nbroken")
    assert len(session.dictionary) == 0
    assert len(session.table) == 0


def test_add_too_long_part_rejected(session):
    with pytest.raises(SessionError):
        session.add_records("k " + "v" * 11)
    assert len(session.dictionary) == 0


def test_add_duplicate_keeps_earlier_and_records_nothing(session):
    session.add_records("alpha one")
    with pytest.raises(SessionError, match="already existed"):
        session.add_records("beta two\nalpha three")
    assert session.lookup("beta") == "two"
    assert session.lookup("alpha") == "one"
    assert len(session.table) == 1


def test_lookup_missing_key(session):
    with pytest.raises(SessionError, match="You have not an object with this key"):
        session.lookup("nothing")


def test_update_value(session):
    session.add_records("alpha one")
    row = session.update_value("alpha", "fresh")
    assert session.lookup("alpha") == "fresh"
    assert row.operation is Operation.GET
    assert row.size == 1
    assert session.table.cell(1, 0) == "Get"


@pytest.mark.parametrize("bad", ["", "x" * 11])
def test_update_value_invalid(session, bad):
    session.add_records("alpha one")
    with pytest.raises(SessionError, match="new value has invalid format"):
        session.update_value("alpha", bad)
    assert session.lookup("alpha") == "one"
    assert len(session.table) == 1


def test_update_missing_key(session):
    with pytest.raises(SessionError):
        session.update_value("ghost", "value")
    assert len(session.table) == 0


def test_remove_by_key_and_pair(session):
    session.add_records("alpha one\nbeta two\ngamma three")
    row = session.remove_records("alpha\nbeta two")
    assert "alpha" not in session.dictionary
    assert "beta" not in session.dictionary
    assert session.lookup("gamma") == "three"
    assert row.operation is Operation.REMOVE
    assert row.size == 2


def test_remove_empty_text_does_nothing(session):
    session.add_records("alpha one")
    assert session.remove_records("") is None
    assert len(session.dictionary) == 1
    assert len(session.table) == 1


def test_remove_missing_key_reports_line(session):
    session.add_records("alpha one\nbeta two")
    with pytest.raises(SessionError, match="number of string:1"):
        session.remove_records("alpha\nzeta")
    assert "alpha" not in session.dictionary
    assert session.lookup("beta") == "two"
    assert len(session.table) == 1


def test_remove_value_mismatch(session):
    session.add_records("alpha one")
    with pytest.raises(SessionError, match="this value"):
        session.remove_records("alpha other")
    assert session.lookup("alpha") == "one"


def test_remove_invalid_format(session):
    session.add_records("alpha one")
    with pytest.raises(SessionError, match="wrong format"):
        session.remove_records("a b c")
    assert len(session.dictionary) == 1


def test_dump_lines_round_trip(session):
    text = "alpha one\nbeta two\ngamma three"
    session.add_records(text)
    assert sorted(session.dump_lines()) == sorted(text.split("\n"))

    other = DictionarySession()
    other.add_records("\n".join(session.dump_lines()))
    assert sorted(other.dump_lines()) == sorted(session.dump_lines())


def test_custom_max_length():
    short = DictionarySession(max_length=3)
    with pytest.raises(SessionError):
        short.add_records("abcd x")
    short.add_records("abc xyz")
    assert short.lookup("abc") == "xyz"


def test_invalid_max_length():
    with pytest.raises(ValueError):
        DictionarySession(max_length=0)