"""
Error taxonomy for domain validation.

Every domain error kind carries a fixed message and a severity. Callers are
expected to treat any error as "reject this domain" and use the kind only for
diagnostics.
"""

from enum import Enum


class Severity(Enum):
    """How bad a validation failure is."""

    INVALID = "invalid"  # Caller input is simply rejected
    SEVERE = "severe"  # Unexpected; likely a gap in reference data


class DomainError(Exception):
    """Base class for domain validation failures."""

    message = "Invalid domain"
    severity = Severity.INVALID

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        """Name of the error kind (e.g. ``"LengthError"``)."""
        return type(self).__name__

    def to_dict(self) -> dict:
        return {
            "error": self.kind,
            "message": self.message,
            "severity": self.severity.value,
        }

    def __eq__(self, other):
        if not isinstance(other, DomainError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self):
        return hash((type(self), self.message))

    def __repr__(self):
        return f"{self.kind}({self.message!r})"


class LengthError(DomainError):
    """Entire domain, a single label, or the subdomain count is out of bounds."""

    message = "Invalid length"


class FormatError(DomainError):
    """Invalid characters, hyphen placement, or an empty label."""

    message = "Invalid formatting"


class InvalidEncodingError(DomainError):
    """Malformed UTF-8 at the point being inspected."""

    message = "Invalid UTF-8 encoding"


class UnknownError(DomainError):
    """All syntax checks passed but the TLD is not recognized."""

    message = "Unknown error"
    severity = Severity.SEVERE


class RegistryError(Exception):
    """Refreshing the TLD registry failed. Already-loaded data is untouched."""
