"""
Tests for the Sv syntax model.

These tests verify:
    - Basic value creation
    - Invariants (non-empty records, records without a first record)
    - Immutability
    - Iteration helpers
"""

from dataclasses import FrozenInstanceError

import pytest

from svsyntax.syntax import (
    Header,
    HorizontalSpace,
    Newline,
    Quote,
    Quoted,
    Record,
    Records,
    Spaced,
    Sv,
    Unquoted,
)


def plain(content):
    return Spaced(leading=(), value=Unquoted(content), trailing=())


class TestEnums:
    """Test enum text accessors."""

    def test_newline_text(self):
        assert Newline.CR.text == "\r"
        assert Newline.LF.text == "\n"
        assert Newline.CRLF.text == "\r\n"

    def test_space_text(self):
        assert HorizontalSpace.SPACE.text == " "
        assert HorizontalSpace.TAB.text == "\t"

    def test_quote_char(self):
        assert Quote.SINGLE.char == "'"
        assert Quote.DOUBLE.char == '"'


class TestField:
    """Test field values."""

    def test_unquoted_defaults_to_empty(self):
        assert Unquoted().content == ""

    def test_quoted_equality_includes_quote(self):
        assert Quoted(Quote.SINGLE, "x") != Quoted(Quote.DOUBLE, "x")
        assert Quoted(Quote.SINGLE, "x") != Unquoted("x")

    def test_fields_are_immutable(self):
        field = Unquoted("x")
        with pytest.raises(FrozenInstanceError):
            field.content = "y"


class TestSpaced:
    """Test the generic spaces wrapper."""

    def test_parameterized_wrapper_holds_its_value(self):
        spaced = Spaced[Quoted]((HorizontalSpace.TAB,), Quoted(Quote.DOUBLE, "x"))
        assert spaced.value == Quoted(Quote.DOUBLE, "x")
        assert spaced.trailing == ()

    def test_parameterization_does_not_affect_equality(self):
        assert Spaced[Unquoted]((), Unquoted("a"), ()) == plain("a")


class TestRecord:
    """Test Record invariants."""

    def test_record_requires_a_field(self):
        with pytest.raises(ValueError):
            Record(fields=())

    def test_values_drop_spaces(self):
        record = Record((Spaced((HorizontalSpace.SPACE,), Unquoted("a"), ()), plain("b")))
        assert record.values() == (Unquoted("a"), Unquoted("b"))
        assert len(record) == 2


class TestRecords:
    """Test the alternating record/newline body."""

    def test_empty(self):
        records = Records()
        assert records.is_empty
        assert len(records) == 0
        assert list(records) == []
        assert records.separators() == ()

    def test_rest_without_first_is_rejected(self):
        with pytest.raises(ValueError):
            Records(first=None, rest=((Newline.LF, Record((plain("a"),))),))

    def test_iteration_order(self):
        a = Record((plain("a"),))
        b = Record((plain("b"),))
        records = Records(first=a, rest=((Newline.CRLF, b),))
        assert list(records) == [a, b]
        assert len(records) == 2
        assert records.separators() == (Newline.CRLF,)
        assert not records.is_empty


class TestSv:
    """Test the root container."""

    def test_defaults(self):
        sv = Sv(separator=",")
        assert sv.header is None
        assert sv.records == Records()
        assert sv.ending == ()
        assert sv.all_records() == ()

    def test_all_records_with_header(self):
        h = Record((plain("h"),))
        r = Record((plain("r"),))
        sv = Sv(separator=",", header=Header(h, Newline.LF), records=Records(first=r))
        assert sv.all_records() == (h, r)

    def test_values_are_hashable(self):
        sv = Sv(separator=",", records=Records(first=Record((plain("a"),))))
        assert hash(sv) == hash(Sv(separator=",", records=Records(first=Record((plain("a"),)))))
