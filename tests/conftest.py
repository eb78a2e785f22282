"""Shared test fixtures for the ssml_builder test suite."""

from __future__ import annotations

import pytest

from ssml_builder import SSMLBuilder


@pytest.fixture()
def builder() -> SSMLBuilder:
    return SSMLBuilder()
