"""SSML Builder -- compose speech markup without hand-writing XML.

Public API re-exports for convenient access::

    from ssml_builder import SSMLBuilder, BreakStrength, InterpretAs
"""

from ._version import __version__
from .builder import (
    BREAK_DURATION_DOES_NOT_MATCH_PATTERN_MESSAGE,
    BREAK_DURATION_EXCEEDS_MILLISECONDS_MESSAGE,
    BREAK_DURATION_EXCEEDS_SECONDS_MESSAGE,
    MAX_BREAK_MILLISECONDS,
    MAX_BREAK_SECONDS,
    SSML_LANGUAGE,
    SSML_NAMESPACE,
    SSML_VERSION,
    SSMLBuilder,
)
from .exceptions import SSMLBuilderError, ValidationError
from .models import DurationBreak, Node, SayAs, Sentence, StrengthBreak, Text
from .options import BreakStrength, InterpretAs

__all__ = [
    "__version__",
    # Core
    "SSMLBuilder",
    # Options
    "BreakStrength",
    "InterpretAs",
    # Models
    "Node",
    "Text",
    "Sentence",
    "DurationBreak",
    "StrengthBreak",
    "SayAs",
    # Constants
    "SSML_VERSION",
    "SSML_NAMESPACE",
    "SSML_LANGUAGE",
    "MAX_BREAK_SECONDS",
    "MAX_BREAK_MILLISECONDS",
    "BREAK_DURATION_EXCEEDS_SECONDS_MESSAGE",
    "BREAK_DURATION_EXCEEDS_MILLISECONDS_MESSAGE",
    "BREAK_DURATION_DOES_NOT_MATCH_PATTERN_MESSAGE",
    # Exceptions
    "SSMLBuilderError",
    "ValidationError",
]
