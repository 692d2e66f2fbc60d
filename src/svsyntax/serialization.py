"""
Serialization helpers for Sv syntax values (Sv, Records, Field, etc.).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
This module intentionally keeps serialization structure stable and explicit.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List

import yaml

from svsyntax.syntax import (
    Field,
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


_SPACE_NAMES = {HorizontalSpace.SPACE: "space", HorizontalSpace.TAB: "tab"}
_QUOTE_NAMES = {Quote.SINGLE: "single", Quote.DOUBLE: "double"}


def newline_to_str(nl: Newline) -> str:
    return nl.name


def newline_from_str(s: str) -> Newline:
    try:
        return Newline[s]
    except KeyError:
        raise TypeError(f"Unsupported newline: {s!r}")


def space_to_str(space: HorizontalSpace) -> str:
    return _SPACE_NAMES[space]


def space_from_str(s: str) -> HorizontalSpace:
    for space, name in _SPACE_NAMES.items():
        if name == s:
            return space
    raise TypeError(f"Unsupported space: {s!r}")


def field_to_dict(f: Field) -> Dict[str, Any]:
    if isinstance(f, Quoted):
        return {"type": "quoted", "quote": _QUOTE_NAMES[f.quote], "content": f.content}
    if isinstance(f, Unquoted):
        return {"type": "unquoted", "content": f.content}
    raise TypeError(f"Unsupported Field type: {type(f)}")


def field_from_dict(d: Dict[str, Any]) -> Field:
    t = d.get("type")
    if t == "unquoted":
        return Unquoted(d["content"])
    if t == "quoted":
        quotes = {name: quote for quote, name in _QUOTE_NAMES.items()}
        if d["quote"] not in quotes:
            raise TypeError(f"Unsupported quote: {d['quote']!r}")
        return Quoted(quote=quotes[d["quote"]], content=d["content"])
    raise TypeError(f"Unsupported field dict type: {t}")


def spaced_field_to_dict(s: Spaced) -> Dict[str, Any]:
    return {
        "leading": [space_to_str(sp) for sp in s.leading],
        "field": field_to_dict(s.value),
        "trailing": [space_to_str(sp) for sp in s.trailing],
    }


def spaced_field_from_dict(d: Dict[str, Any]) -> Spaced:
    return Spaced(
        leading=tuple(space_from_str(sp) for sp in d.get("leading", [])),
        value=field_from_dict(d["field"]),
        trailing=tuple(space_from_str(sp) for sp in d.get("trailing", [])),
    )


def record_to_list(r: Record) -> List[Dict[str, Any]]:
    return [spaced_field_to_dict(f) for f in r.fields]


def record_from_list(fields: List[Dict[str, Any]]) -> Record:
    return Record(fields=tuple(spaced_field_from_dict(f) for f in fields))


def records_to_dict(rs: Records) -> Dict[str, Any] | None:
    if rs.first is None:
        return None
    return {
        "first": record_to_list(rs.first),
        "rest": [
            {"newline": newline_to_str(nl), "record": record_to_list(r)}
            for nl, r in rs.rest
        ],
    }


def records_from_dict(d: Dict[str, Any] | None) -> Records:
    if d is None:
        return Records()
    return Records(
        first=record_from_list(d["first"]),
        rest=tuple(
            (newline_from_str(item["newline"]), record_from_list(item["record"]))
            for item in d.get("rest", [])
        ),
    )


def header_to_dict(h: Header | None) -> Dict[str, Any] | None:
    if h is None:
        return None
    return {"record": record_to_list(h.record), "newline": newline_to_str(h.newline)}


def header_from_dict(d: Dict[str, Any] | None) -> Header | None:
    if d is None:
        return None
    return Header(record=record_from_list(d["record"]), newline=newline_from_str(d["newline"]))


def sv_to_dict(sv: Sv) -> Dict[str, Any]:
    return {
        "separator": sv.separator,
        "header": header_to_dict(sv.header),
        "records": records_to_dict(sv.records),
        "ending": [newline_to_str(nl) for nl in sv.ending],
    }


def sv_from_dict(d: Dict[str, Any]) -> Sv:
    return Sv(
        separator=d["separator"],
        header=header_from_dict(d.get("header")),
        records=records_from_dict(d.get("records")),
        ending=tuple(newline_from_str(nl) for nl in d.get("ending", [])),
    )


def sv_to_json(sv: Sv) -> str:
    return json.dumps(sv_to_dict(sv), sort_keys=True)


def sv_from_json(s: str) -> Sv:
    d = json.loads(s)
    return sv_from_dict(d)


def sv_to_yaml(sv: Sv) -> str:
    return yaml.safe_dump(sv_to_dict(sv))


def sv_from_yaml(s: str) -> Sv:
    d = yaml.safe_load(s)
    return sv_from_dict(d)
