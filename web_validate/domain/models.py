"""
Data models for domain validation.

DomainConstraints holds the optional limits applied to a candidate.
DomainCheck bundles a candidate with its constraints and an optional custom
failure message, for callers that build validations ahead of running them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from web_validate.errors import DomainError
    from web_validate.registry import TLDRegistry


@dataclass(frozen=True)
class DomainConstraints:
    """Optional limits for a single validation. Unset fields use the defaults."""

    max_length: int | None = None  # Overrides the 255 scalar value cap
    min_subdomains: int | None = None  # Labels before the TLD
    max_subdomains: int | None = None
    reject_numeric_tld: bool = False  # Fail all-digit TLDs before the registry lookup

    def __post_init__(self):
        for name in ("max_length", "min_subdomains", "max_subdomains"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")


@dataclass
class DomainCheck:
    """A domain value to be validated, with its constraints and failure message."""

    domain: bytes | str
    constraints: DomainConstraints = field(default_factory=DomainConstraints)
    message: str | None = None  # Replaces the error kind's fixed message on failure

    def validate(self, registry: TLDRegistry | None = None) -> DomainError | None:
        """
        Run the validation pipeline.

        Args:
            registry: TLD registry to consult (default: bundled registry)

        Returns:
            The error for the first failing stage, or None if the domain is valid
        """
        from web_validate.domain.validation import check_domain

        error = check_domain(self.domain, self.constraints, registry)
        if error is not None and self.message is not None:
            return type(error)(self.message)
        return error

    def __str__(self) -> str:
        if isinstance(self.domain, str):
            return self.domain
        return bytes(self.domain).decode("utf-8", errors="replace")
