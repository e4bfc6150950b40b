"""
Pytest configuration and shared fixtures for web_validate tests.
"""

from unittest.mock import MagicMock

import pytest

from web_validate.config import Settings
from web_validate.registry import TLDRegistry

TEST_TLDS = ["com", "org", "net", "io", "uk", "dev"]

IANA_SAMPLE = """\
# Version 2026101700, Last Updated Sat Oct 17 07:07:01 2026 UTC
AAA
COM
NET
ORG
XN--VERMGENSBERATER-CTB
ZW
"""


@pytest.fixture
def registry():
    """Small registry with a fixed, lowercase TLD set."""
    return TLDRegistry(TEST_TLDS, source="test")


@pytest.fixture
def iana_sample():
    """A short TLD list in IANA format."""
    return IANA_SAMPLE


@pytest.fixture
def mock_session(iana_sample):
    """requests.Session mock that serves the IANA sample."""
    session = MagicMock()
    response = MagicMock()
    response.status_code = 200
    response.text = iana_sample
    response.raise_for_status.return_value = None
    session.get.return_value = response
    return session


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing the cache at a temporary directory, ignoring .env."""
    return Settings(
        _env_file=None,
        cache_dir=tmp_path / "cache",
        tld_source_url="https://tlds.example.test/list.txt",
    )
