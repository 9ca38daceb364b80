"""The package root exposes a small, lazily imported public surface."""

from __future__ import annotations

import pytest

import schedconf
from schedconf import errors


def test_public_names_resolve() -> None:
    for name in schedconf.__all__:
        assert getattr(schedconf, name) is not None


def test_unknown_attribute_raises() -> None:
    with pytest.raises(AttributeError):
        getattr(schedconf, "not_a_public_name")


def test_every_error_derives_from_base() -> None:
    for name in errors.__all__:
        obj = getattr(errors, name)
        if isinstance(obj, type):
            assert issubclass(obj, errors.SchedConfError)


def test_format_error() -> None:
    assert errors.format_error(errors.ConfigLoadError("bad file")) == (
        "ConfigLoadError: bad file"
    )
    assert errors.format_error(errors.RegistryError()) == "RegistryError"
