"""Backends for Sv output generation (text printing)."""

from .printer import print_field, print_record, print_spaced, print_sv

__all__ = ["print_field", "print_record", "print_spaced", "print_sv"]
