"""SSMLBuilder -- compose SSML documents with chained method calls.

Supports the subset of SSML tags understood by voice assistants:

  Method                 SSML
  ─────────────────────  ──────────────────────────────────────
  say()                  raw text inside <speak>
  sentence()             <s>
  break_by_duration()    <break time="..." />
  break_by_strength()    <break strength="..." />
  say_as()               <say-as interpret-as="..." format="...">

Example::

    ssml = SSMLBuilder().say("Hello, world!").break_by_duration("1s").say("My name is Joe.").to_string()
"""

from __future__ import annotations

import logging
import re

from lxml import etree

from .exceptions import ValidationError
from .models import (
    DurationBreak,
    Node,
    SayAs,
    Sentence,
    StrengthBreak,
    Text,
)
from .options import BreakStrength, InterpretAs

logger = logging.getLogger(__name__)

SSML_VERSION = "1.0"
SSML_NAMESPACE = "https://www.w3.org/2001/10/synthesis"
SSML_LANGUAGE = "en-US"

MAX_BREAK_SECONDS = 10
MAX_BREAK_MILLISECONDS = 10000

BREAK_DURATION_EXCEEDS_SECONDS_MESSAGE = (
    "The break duration exceeds the allowed 10 second duration."
)
BREAK_DURATION_EXCEEDS_MILLISECONDS_MESSAGE = (
    "The break duration exceeds the allowed 10,000 milliseconds duration."
)
BREAK_DURATION_DOES_NOT_MATCH_PATTERN_MESSAGE = (
    "The duration must be a number followed by either 's' for second or 'ms' "
    "for milliseconds. e.g., 10s or 100ms. Max duration is 10 seconds "
    "(10000 milliseconds)."
)

_DURATION_RE = re.compile(r"(\d*\.?\d+)(s|ms)", re.IGNORECASE | re.ASCII)

# Digits needed to write the largest limit; longer values exceed every limit.
_MAX_SIGNIFICANT_DIGITS = len(str(MAX_BREAK_MILLISECONDS))


# ---------------------------------------------------------------------------
# Escaping
# ---------------------------------------------------------------------------


def _escape_text(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_attr(value: str) -> str:
    return _escape_text(value).replace('"', "&quot;")


def _attr(name: str, value: str) -> str:
    return f' {name}="{_escape_attr(value)}"'


# ---------------------------------------------------------------------------
# Node serializers
# ---------------------------------------------------------------------------


def _render_node(node: Node) -> str:
    if isinstance(node, Text):
        return _escape_text(node.text)
    if isinstance(node, Sentence):
        return f"<s>{_escape_text(node.text)}</s>"
    if isinstance(node, DurationBreak):
        return f"<break{_attr('time', node.time)} />"
    if isinstance(node, StrengthBreak):
        return f"<break{_attr('strength', node.strength.token)} />"
    if isinstance(node, SayAs):
        attrs = _attr("interpret-as", node.interpret_as.token)
        if node.format:
            attrs += _attr("format", node.format)
        return f"<say-as{attrs}>{_escape_text(node.text)}</say-as>"
    raise TypeError(f"Unsupported SSML node: {node!r}")


def _render_document(nodes: list[Node]) -> str:
    attrs = (
        _attr("version", SSML_VERSION)
        + _attr("xmlns", SSML_NAMESPACE)
        + _attr("xml:lang", SSML_LANGUAGE)
    )
    body = "".join(_render_node(n) for n in nodes)
    return f"<speak{attrs}>{body}</speak>"


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _reject_duration(message: str, duration: str) -> ValidationError:
    logger.debug("Rejected break duration %r: %s", duration, message)
    return ValidationError(message, "duration")


def _validate_duration(duration: str) -> None:
    """Check *duration* against the pattern and the break length limits.

    The numeric part is read as a whole number, so fractional values such
    as ``5.5s`` match the pattern but are still rejected.  Only ASCII
    digits are accepted, and leading zeros do not count towards the limits.
    """
    m = _DURATION_RE.fullmatch(duration)
    if m is None:
        raise _reject_duration(BREAK_DURATION_DOES_NOT_MATCH_PATTERN_MESSAGE, duration)

    value, unit = m.group(1), m.group(2)
    if "." in value:
        raise _reject_duration(BREAK_DURATION_DOES_NOT_MATCH_PATTERN_MESSAGE, duration)

    digits = value.lstrip("0")
    if len(digits) > _MAX_SIGNIFICANT_DIGITS:
        amount = MAX_BREAK_MILLISECONDS + 1
    else:
        amount = int(digits or "0")

    if unit.lower() == "s":
        if amount > MAX_BREAK_SECONDS:
            raise _reject_duration(BREAK_DURATION_EXCEEDS_SECONDS_MESSAGE, duration)
    elif amount > MAX_BREAK_MILLISECONDS:
        raise _reject_duration(BREAK_DURATION_EXCEEDS_MILLISECONDS_MESSAGE, duration)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


class SSMLBuilder:
    """Accumulate SSML content and render it as a single ``<speak>`` document.

    Every operation appends one node to the end of the document and returns
    the builder, so calls can be chained.  The builder stays usable after
    :meth:`to_string`; it is not safe to share between threads.

    Parameters
    ----------
    text:
        Optional raw text to seed the document with.  It is stripped of
        surrounding whitespace; an empty string still adds an (empty)
        text node.
    """

    SSML_VERSION = SSML_VERSION
    SSML_NAMESPACE = SSML_NAMESPACE
    SSML_LANGUAGE = SSML_LANGUAGE

    MAX_BREAK_SECONDS = MAX_BREAK_SECONDS
    MAX_BREAK_MILLISECONDS = MAX_BREAK_MILLISECONDS

    BREAK_DURATION_EXCEEDS_SECONDS_MESSAGE = BREAK_DURATION_EXCEEDS_SECONDS_MESSAGE
    BREAK_DURATION_EXCEEDS_MILLISECONDS_MESSAGE = BREAK_DURATION_EXCEEDS_MILLISECONDS_MESSAGE
    BREAK_DURATION_DOES_NOT_MATCH_PATTERN_MESSAGE = BREAK_DURATION_DOES_NOT_MATCH_PATTERN_MESSAGE

    def __init__(self, text: str | None = None) -> None:
        self._nodes: list[Node] = []
        if text is not None:
            self._nodes.append(Text(text.strip()))

    # -- content ------------------------------------------------------------

    def say(self, text: str) -> SSMLBuilder:
        """Append raw text to the ``<speak>`` element."""
        self._nodes.append(Text(text.strip()))
        return self

    def sentence(self, text: str) -> SSMLBuilder:
        """Append an ``<s>`` element wrapping *text*."""
        self._nodes.append(Sentence(text.strip()))
        return self

    def break_by_duration(self, duration: str) -> SSMLBuilder:
        """Append a ``<break>`` that pauses for *duration*.

        *duration* is a whole number followed by ``s`` or ``ms``, e.g.
        ``"1s"`` or ``"250ms"``, and may not exceed 10 seconds
        (10000 milliseconds).  It is written to the ``time`` attribute
        exactly as given.

        Raises :class:`~ssml_builder.exceptions.ValidationError` if the
        duration is malformed or too long.  The document is left
        unchanged in that case.
        """
        _validate_duration(duration)
        self._nodes.append(DurationBreak(duration))
        return self

    def break_by_strength(self, strength: BreakStrength) -> SSMLBuilder:
        """Append a ``<break>`` whose length is given by a named *strength*."""
        self._nodes.append(StrengthBreak(strength))
        return self

    def say_as(self, text: str, interpret_as: InterpretAs, format: str = "") -> SSMLBuilder:
        """Append a ``<say-as>`` element.

        *interpret_as* names the content type of *text*; *format* gives
        extra detail about it (``"mdy"`` for a date, a country code for a
        telephone number) and is omitted when empty.
        """
        self._nodes.append(SayAs(interpret_as, text.strip(), format or None))
        return self

    # -- inspection ---------------------------------------------------------

    @property
    def nodes(self) -> tuple[Node, ...]:
        """Snapshot of the document's children, in insertion order."""
        return tuple(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={len(self._nodes)})"

    # -- output -------------------------------------------------------------

    def to_string(self) -> str:
        """Render the document as a compact SSML string."""
        return _render_document(self._nodes)

    def __str__(self) -> str:
        return self.to_string()

    def to_element(self) -> etree._Element:
        """Render the document and return it as an ``lxml`` element tree."""
        return etree.fromstring(self.to_string().encode("utf-8"))  # noqa: S320
