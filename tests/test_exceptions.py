"""Tests for ssml_builder.exceptions."""

from __future__ import annotations

import pytest

from ssml_builder.exceptions import SSMLBuilderError, ValidationError


class TestValidationError:
    def test_is_package_error(self) -> None:
        assert issubclass(ValidationError, SSMLBuilderError)

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise ValidationError("bad input", "duration")

    def test_message_names_parameter(self) -> None:
        err = ValidationError("bad input", "duration")
        assert err.param_name == "duration"
        assert str(err) == "bad input (Parameter 'duration')"

    def test_message_without_parameter(self) -> None:
        err = ValidationError("bad input")
        assert err.param_name is None
        assert str(err) == "bad input"
