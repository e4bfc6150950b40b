"""
Unit tests for web_validate.cli command entry points.

Settings are patched so the cache lives in a temporary directory and no
network access happens.
"""

import json
import logging
from unittest.mock import patch

import pytest

from web_validate.cache import TLDCache
from web_validate.cli.commands import (
    EXIT_INVALID,
    EXIT_OK,
    EXIT_REGISTRY_ERROR,
    run_cache,
    run_update_tlds,
    run_validate,
)


@pytest.fixture(autouse=True)
def restore_package_logger():
    """setup_logging rewires the package logger; put it back afterwards."""
    pkg_logger = logging.getLogger("web_validate")
    handlers, propagate, level = pkg_logger.handlers[:], pkg_logger.propagate, pkg_logger.level
    yield
    pkg_logger.handlers = handlers
    pkg_logger.propagate = propagate
    pkg_logger.setLevel(level)


@pytest.fixture
def settings(test_settings):
    with patch("web_validate.cli.commands.get_settings", return_value=test_settings):
        yield test_settings


@pytest.fixture
def tld_file(tmp_path, iana_sample):
    path = tmp_path / "tlds.txt"
    path.write_text(iana_sample, encoding="utf-8")
    return path


class TestValidateCommand:
    """Tests for run_validate (validate-domain)."""

    def test_valid_domain(self, settings, capsys):
        assert run_validate(["example.com"]) == EXIT_OK
        assert "example.com: valid" in capsys.readouterr().out

    def test_invalid_domain(self, settings, capsys):
        assert run_validate(["-example.com"]) == EXIT_INVALID
        assert "-example.com: FormatError (Invalid formatting)" in capsys.readouterr().out

    def test_mixed_results(self, settings, capsys):
        assert run_validate(["example.com", "example.zz"]) == EXIT_INVALID
        out = capsys.readouterr().out
        assert "example.com: valid" in out
        assert "example.zz: UnknownError (Unknown error)" in out

    def test_json_output(self, settings, capsys):
        run_validate(["example.com", "bad_.com", "--json"])
        lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]

        assert lines[0] == {"domain": "example.com", "valid": True}
        assert lines[1]["valid"] is False
        assert lines[1]["error"] == "FormatError"
        assert lines[1]["severity"] == "invalid"

    def test_constraints(self, settings, capsys):
        assert run_validate(["example.com", "--max-subdomains", "0"]) == EXIT_INVALID
        assert "LengthError" in capsys.readouterr().out

        assert run_validate(["a.b.example.com", "--min-subdomains", "3"]) == EXIT_OK

    def test_reject_numeric_tld(self, settings, tmp_path, capsys):
        path = tmp_path / "numeric.txt"
        path.write_text("com\n123\n", encoding="utf-8")

        assert run_validate(["example.123", "--tld-source", str(path)]) == EXIT_OK
        assert (
            run_validate(["example.123", "--tld-source", str(path), "--reject-numeric-tld"])
            == EXIT_INVALID
        )

    def test_file_input(self, settings, tmp_path, capsys):
        path = tmp_path / "domains.txt"
        path.write_bytes(b"example.com\n\n  example.org  \nexa\xffmple.com\n")

        assert run_validate(["--file", str(path)]) == EXIT_INVALID
        out = capsys.readouterr().out
        assert "example.com: valid" in out
        assert "example.org: valid" in out
        assert "exa\\xffmple.com: InvalidEncodingError" in out

    def test_tld_source_refresh(self, settings, tld_file, capsys):
        assert run_validate(["example.zw", "--tld-source", str(tld_file)]) == EXIT_OK
        assert run_validate(["example.io", "--tld-source", str(tld_file)]) == EXIT_INVALID

    def test_tld_source_failure(self, settings, tmp_path):
        missing = tmp_path / "missing.txt"
        assert run_validate(["example.com", "--tld-source", str(missing)]) == EXIT_REGISTRY_ERROR

    def test_requires_input(self, settings):
        with pytest.raises(SystemExit) as exc_info:
            run_validate([])
        assert exc_info.value.code == 2

    def test_negative_constraint_rejected(self, settings):
        with pytest.raises(SystemExit):
            run_validate(["example.com", "--max-length", "-1"])

    def test_log_file(self, settings, tmp_path):
        log_dir = tmp_path / "logs"
        run_validate(["example.com", "example.org", "--log-dir", str(log_dir)])
        log_files = list(log_dir.glob("validate_domain_*.log"))
        assert len(log_files) == 1
        assert "2 valid, 0 invalid" in log_files[0].read_text(encoding="utf-8")


class TestUpdateTldsCommand:
    """Tests for run_update_tlds (update-tlds)."""

    def test_update_writes_cache(self, settings, tld_file):
        assert run_update_tlds(["--source", str(tld_file)]) == EXIT_OK

        with TLDCache(settings.cache_dir) as cache:
            assert "zw" in cache.get_list(str(tld_file))

    def test_update_failure(self, settings, tmp_path):
        assert run_update_tlds(["--source", str(tmp_path / "missing.txt")]) == EXIT_REGISTRY_ERROR

    def test_updated_list_used_at_startup(self, settings, tld_file, capsys):
        run_update_tlds(["--source", str(tld_file)])
        configured = settings.model_copy(update={"tld_source_url": str(tld_file)})
        with patch("web_validate.cli.commands.get_settings", return_value=configured):
            assert run_validate(["example.zw"]) == EXIT_OK
            assert run_validate(["example.io"]) == EXIT_INVALID


class TestCacheCommand:
    """Tests for run_cache (tld-cache)."""

    def test_stats(self, settings, tld_file, capsys):
        run_update_tlds(["--source", str(tld_file)])
        capsys.readouterr()

        assert run_cache(["stats"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Cached lists: 1" in out
        assert "6 TLDs" in out

    def test_clear(self, settings, tld_file, capsys):
        run_update_tlds(["--source", str(tld_file)])

        assert run_cache(["clear", "--yes"]) == EXIT_OK
        assert "Cleared 1 cached lists" in capsys.readouterr().out
        with TLDCache(settings.cache_dir) as cache:
            assert cache.sources() == []

    def test_clear_aborted(self, settings, tld_file, capsys):
        run_update_tlds(["--source", str(tld_file)])

        with patch("builtins.input", return_value="n"):
            assert run_cache(["clear"]) == EXIT_OK
        assert "Aborted" in capsys.readouterr().out
        with TLDCache(settings.cache_dir) as cache:
            assert cache.sources() == [str(tld_file)]
