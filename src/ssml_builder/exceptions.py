"""Custom exception hierarchy for the ssml_builder package."""

from __future__ import annotations


class SSMLBuilderError(Exception):
    """Base exception for all ssml_builder errors."""


class ValidationError(SSMLBuilderError, ValueError):
    """Raised when an argument to a builder operation is rejected."""

    def __init__(self, message: str, param_name: str | None = None) -> None:
        self.param_name = param_name
        suffix = ""
        if param_name is not None:
            suffix = f" (Parameter '{param_name}')"
        super().__init__(f"{message}{suffix}")
