"""Closed option sets for SSML attribute values.

Each member's value is the token written into the markup, so the
member-to-token lookup is total.  Definition order is significant: it is
the ordinal order of the set.
"""

from __future__ import annotations

from enum import Enum


class _OptionSet(Enum):
    @property
    def token(self) -> str:
        """The attribute value emitted for this member."""
        return self.value

    @property
    def ordinal(self) -> int:
        """Zero-based position of this member within its set."""
        return list(type(self)).index(self)


class BreakStrength(_OptionSet):
    """Relative duration of a ``<break>`` element."""

    NONE = "none"
    X_WEAK = "x-weak"
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    X_STRONG = "x-strong"


class InterpretAs(_OptionSet):
    """Content type of the text inside a ``<say-as>`` element.

    Members:
        ADDRESS: an address, e.g. ``150th CT NE, Redmond, WA``.
        CARDINAL / NUMBER: a cardinal number (``3`` -> "three").
        CHARACTERS / SPELL_OUT: spelled out letter by letter.
        DATE: a date; pair with a ``format`` such as ``mdy``.
        DIGITS / NUMBER_DIGIT: a sequence of individual digits.
        FRACTION: a fractional number (``3/8``).
        ORDINAL: an ordinal number (``3rd`` -> "third").
        TELEPHONE: a telephone number; ``format`` may hold a country code.
        TIME: a time; ``format`` is ``hms12`` or ``hms24``.
    """

    NONE = "none"
    ADDRESS = "address"
    CARDINAL = "cardinal"
    NUMBER = "number"
    CHARACTERS = "characters"
    SPELL_OUT = "spell-out"
    DATE = "date"
    DIGITS = "digits"
    NUMBER_DIGIT = "number_digit"
    FRACTION = "fraction"
    ORDINAL = "ordinal"
    TELEPHONE = "telephone"
    TIME = "time"
