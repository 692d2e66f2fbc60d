"""
Tests for serialization and deserialization of Sv values.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `svsyntax.serialization`.
"""

import pytest

from svsyntax.examples import build_example_sv
from svsyntax.parser import csv
from svsyntax.serialization import (
    field_from_dict,
    field_to_dict,
    sv_from_dict,
    sv_from_json,
    sv_from_yaml,
    sv_to_dict,
    sv_to_json,
    sv_to_yaml,
)
from svsyntax.syntax import Headedness, Newline, Quote, Quoted, Sv, Unquoted


def build_sample_sv() -> Sv:
    return csv("name, 'nick'\r\n\"Ann \"\"A\"\"\",\tx \nb\n\n", Headedness.HEADED)


def test_field_dicts():
    assert field_to_dict(Unquoted("a")) == {"type": "unquoted", "content": "a"}
    assert field_to_dict(Quoted(Quote.SINGLE, "b")) == {"type": "quoted", "quote": "single", "content": "b"}
    assert field_from_dict({"type": "quoted", "quote": "double", "content": "c"}) == Quoted(Quote.DOUBLE, "c")


def test_unsupported_field_dict():
    with pytest.raises(TypeError):
        field_from_dict({"type": "mystery"})


def test_dict_structure():
    d = sv_to_dict(csv("a\r\nb\n"))
    assert d["separator"] == ","
    assert d["header"] is None
    assert d["ending"] == ["LF"]
    assert d["records"]["rest"][0]["newline"] == "CRLF"
    assert d["records"]["first"] == [{"leading": [], "field": {"type": "unquoted", "content": "a"}, "trailing": []}]


def test_empty_records_are_null():
    d = sv_to_dict(csv(""))
    assert d["records"] is None
    assert sv_from_dict(d) == csv("")


def test_dict_round_trip():
    sv = build_sample_sv()
    assert sv_from_dict(sv_to_dict(sv)) == sv


def test_json_round_trip():
    sv = build_sample_sv()
    assert sv_from_json(sv_to_json(sv)) == sv


def test_yaml_round_trip():
    sv = build_example_sv(row_count=2, newline=Newline.CRLF)
    assert sv_from_yaml(sv_to_yaml(sv)) == sv


def test_yaml_round_trip_spaces():
    sv = build_sample_sv()
    restored = sv_from_yaml(sv_to_yaml(sv))
    assert restored.records.first.fields[1].leading == sv.records.first.fields[1].leading
    assert restored == sv
