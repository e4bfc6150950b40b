"""
Domain name validation.

Provides the staged domain validator and its constraint models.
"""

from web_validate.domain.models import DomainCheck, DomainConstraints
from web_validate.domain.validation import (
    check_domain,
    is_valid_domain,
    validate_domain,
    validate_many,
)

__all__ = [
    "DomainCheck",
    "DomainConstraints",
    "check_domain",
    "is_valid_domain",
    "validate_domain",
    "validate_many",
]
