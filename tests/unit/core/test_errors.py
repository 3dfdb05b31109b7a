# tests/unit/core/test_errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from embedfsm.core.errors import ConfigurationError, FSMError


def test_error_hierarchy():
    assert issubclass(ConfigurationError, FSMError)
    assert issubclass(FSMError, Exception)


def test_configuration_error_is_a_value_error():
    """Callers that already catch ValueError for bad arguments keep working."""
    with pytest.raises(ValueError):
        raise ConfigurationError("bad threshold")


def test_error_message():
    err = ConfigurationError("Hook must be callable")
    assert str(err) == "Hook must be callable"
