"""
Unit tests for web_validate.errors.
"""

import pytest

from web_validate.errors import (
    DomainError,
    FormatError,
    InvalidEncodingError,
    LengthError,
    RegistryError,
    Severity,
    UnknownError,
)


@pytest.mark.parametrize(
    "error_cls, message, severity",
    [
        (LengthError, "Invalid length", Severity.INVALID),
        (FormatError, "Invalid formatting", Severity.INVALID),
        (InvalidEncodingError, "Invalid UTF-8 encoding", Severity.INVALID),
        (UnknownError, "Unknown error", Severity.SEVERE),
    ],
)
def test_fixed_message_and_severity(error_cls, message, severity):
    error = error_cls()
    assert isinstance(error, DomainError)
    assert error.message == message
    assert str(error) == message
    assert error.severity is severity
    assert error_cls.severity is severity


def test_custom_message():
    error = FormatError("Bad hostname")
    assert error.message == "Bad hostname"
    assert FormatError.message == "Invalid formatting"


def test_to_dict():
    assert UnknownError().to_dict() == {
        "error": "UnknownError",
        "message": "Unknown error",
        "severity": "severe",
    }


def test_equality_by_kind_and_message():
    assert LengthError() == LengthError()
    assert LengthError() != FormatError()
    assert LengthError() != LengthError("other")
    assert len({LengthError(), LengthError()}) == 1


def test_repr():
    assert repr(FormatError()) == "FormatError('Invalid formatting')"


def test_registry_error_is_not_a_domain_error():
    assert not issubclass(RegistryError, DomainError)
