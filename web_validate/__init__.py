"""
web_validate - validation of web data types.

This package provides:
- Domain name validation (length, label, character and encoding checks)
- A refreshable registry of recognized top-level domains
- Command-line tools for validating domains and updating the TLD list
"""

import logging

# Set up NullHandler to prevent "No handler found" warnings
# when used as a library. Applications should configure their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

from web_validate.domain import (
    DomainCheck,
    DomainConstraints,
    check_domain,
    is_valid_domain,
    validate_domain,
    validate_many,
)
from web_validate.errors import (
    DomainError,
    FormatError,
    InvalidEncodingError,
    LengthError,
    RegistryError,
    Severity,
    UnknownError,
)
from web_validate.registry import TLDRegistry, TLDSnapshot, build_registry

__all__ = [
    "__version__",
    # Validation
    "DomainCheck",
    "DomainConstraints",
    "check_domain",
    "is_valid_domain",
    "validate_domain",
    "validate_many",
    # Errors
    "DomainError",
    "FormatError",
    "InvalidEncodingError",
    "LengthError",
    "RegistryError",
    "Severity",
    "UnknownError",
    # Registry
    "TLDRegistry",
    "TLDSnapshot",
    "build_registry",
]
