"""Data models for the nodes of an SSML document.

Immutable dataclasses, one per markup shape the builder can emit.  The
``<speak>`` root itself is not modelled: its attributes are fixed and it
is owned by :class:`~ssml_builder.builder.SSMLBuilder`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias, Union

from .options import BreakStrength, InterpretAs

# Type alias for the children of <speak>.
Node: TypeAlias = Union["Text", "Sentence", "DurationBreak", "StrengthBreak", "SayAs"]


@dataclass(frozen=True)
class Text:
    """Raw character data placed directly inside ``<speak>``."""

    text: str = ""


@dataclass(frozen=True)
class Sentence:
    """An ``<s>`` element."""

    text: str = ""


@dataclass(frozen=True)
class DurationBreak:
    """A ``<break>`` element with a ``time`` attribute."""

    time: str  # validated literal, e.g. "500ms"


@dataclass(frozen=True)
class StrengthBreak:
    """A ``<break>`` element with a ``strength`` attribute."""

    strength: BreakStrength


@dataclass(frozen=True)
class SayAs:
    """A ``<say-as>`` element.

    ``format`` is only rendered when it is a non-empty string.
    """

    interpret_as: InterpretAs
    text: str = ""
    format: str | None = None
