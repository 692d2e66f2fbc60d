"""
Parser configuration.

An SvConfig names the separator character and whether the document
starts with a header row. Presets exist for comma, pipe and tab.
"""
from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, Dict

import yaml

from svsyntax.syntax import COMMA, PIPE, TAB, Headedness, Quote


class SvConfigError(ValueError):
    """Raised when a configuration value is invalid."""
    pass


def validate_separator(separator: str) -> None:
    """Raise SvConfigError unless `separator` is one character other than CR or LF."""
    if not isinstance(separator, str) or len(separator) != 1:
        raise SvConfigError(f"Separator must be a single character, got {separator!r}")
    if separator in "\r\n":
        raise SvConfigError("Separator cannot be a newline character")


@dataclass(frozen=True)
class SvConfig:
    """
    Settings consumed by the parser.

    Properties:
        separator: Any single character other than CR or LF
        headedness: Whether the first line is a header row
    """

    separator: str = COMMA
    headedness: Headedness = Headedness.UNHEADED

    def __post_init__(self):
        validate_separator(self.separator)
        if not isinstance(self.headedness, Headedness):
            raise SvConfigError(f"Unsupported headedness: {self.headedness!r}")
        if self.separator in (Quote.SINGLE.char, Quote.DOUBLE.char):
            warnings.warn(
                f"Separator {self.separator!r} is also a quote character; "
                "fields starting with it will be read as quoted",
                UserWarning,
            )

    @classmethod
    def csv(cls, headedness: Headedness = Headedness.UNHEADED) -> SvConfig:
        return cls(separator=COMMA, headedness=headedness)

    @classmethod
    def psv(cls, headedness: Headedness = Headedness.UNHEADED) -> SvConfig:
        return cls(separator=PIPE, headedness=headedness)

    @classmethod
    def tsv(cls, headedness: Headedness = Headedness.UNHEADED) -> SvConfig:
        return cls(separator=TAB, headedness=headedness)


def config_to_dict(c: SvConfig) -> Dict[str, Any]:
    return {"separator": c.separator, "headedness": c.headedness.value}


def config_from_dict(d: Dict[str, Any]) -> SvConfig:
    headedness = d.get("headedness", Headedness.UNHEADED.value)
    try:
        headedness = Headedness(headedness)
    except ValueError:
        raise SvConfigError(f"Unsupported headedness: {headedness!r}")
    return SvConfig(separator=d.get("separator", COMMA), headedness=headedness)


def config_to_yaml(c: SvConfig) -> str:
    return yaml.safe_dump(config_to_dict(c))


def config_from_yaml(s: str) -> SvConfig:
    d = yaml.safe_load(s) or {}
    if not isinstance(d, dict):
        raise SvConfigError("Configuration YAML must be a mapping")
    return config_from_dict(d)


__all__ = [
    "SvConfig",
    "SvConfigError",
    "validate_separator",
    "config_to_dict",
    "config_from_dict",
    "config_to_yaml",
    "config_from_yaml",
]
