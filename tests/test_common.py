"""Tests for common utilities."""

import logging

import pytest

from shortlinks.errors import EmptyInput
from shortlinks.common.validators import normalize_target, has_scheme
from shortlinks.common.headers import extract_forwarded_headers, build_base_url
from shortlinks.common.url_builder import build_short_url
from shortlinks.common.logging_config import setup_logging, get_logger


class TestValidators:
    """Test normalization and validation."""

    def test_normalize_adds_http(self):
        assert normalize_target("example.com") == "http://example.com"
        assert normalize_target("example.com/a?b=1") == "http://example.com/a?b=1"

    def test_normalize_keeps_scheme(self):
        assert normalize_target("http://example.com") == "http://example.com"
        assert normalize_target("https://example.com") == "https://example.com"

    def test_normalize_scheme_case_insensitive(self):
        """Uppercase schemes count as present."""
        assert normalize_target("HTTPS://Example.com") == "HTTPS://Example.com"

    def test_normalize_only_http_schemes_count(self):
        """Other schemes are treated as missing, per the prefix rule."""
        assert normalize_target("ftp://example.com") == "http://ftp://example.com"

    def test_normalize_keeps_whitespace(self):
        assert normalize_target("  example.com\n") == "http://  example.com\n"
        assert normalize_target("   ") == "http://   "

    def test_normalize_empty(self):
        with pytest.raises(EmptyInput):
            normalize_target("")
        with pytest.raises(EmptyInput):
            normalize_target(None)

    def test_has_scheme(self):
        assert has_scheme("http://a")
        assert has_scheme("https://a")
        assert not has_scheme("a.com")
        assert not has_scheme("httpx://a")


class TestHeaders:
    """Test header utilities."""

    def test_extract_forwarded_headers(self):
        headers = {
            "X-Forwarded-Proto": "https",
            "X-Forwarded-Host": "example.com",
            "X-Forwarded-For": "1.2.3.4",
        }

        result = extract_forwarded_headers(headers)
        assert result.proto == "https"
        assert result.host == "example.com"
        assert result.client == "1.2.3.4"

    def test_extract_forwarded_first_hop(self):
        """Only the left-most entry of a proxy chain is used."""
        headers = {"x-forwarded-for": "1.2.3.4, 10.0.0.1", "x-forwarded-proto": "https,http"}

        result = extract_forwarded_headers(headers)
        assert result.client == "1.2.3.4"
        assert result.proto == "https"
        assert result.host is None

    def test_build_base_url_from_headers(self):
        headers = {
            "X-Forwarded-Proto": "https",
            "X-Forwarded-Host": "example.com",
        }

        base_url = build_base_url(
            headers=headers,
            fallback_base_url="http://localhost:8080",
            request_scheme="http",
            request_host="internal:8080",
        )

        assert base_url == "https://example.com"

    def test_build_base_url_from_request(self):
        base_url = build_base_url(
            headers={},
            fallback_base_url="http://localhost:8080",
            request_scheme="http",
            request_host="short.example:8080",
        )

        assert base_url == "http://short.example:8080"

    def test_build_base_url_fallback(self):
        base_url = build_base_url(
            headers={},
            fallback_base_url="http://localhost:8080/",
        )

        assert base_url == "http://localhost:8080"


class TestURLBuilder:
    """Test URL building utilities."""

    def test_build_short_url_no_prefix(self):
        url = build_short_url(
            key="0a1b2c3d",
            base_url="https://example.com/",
        )

        assert url == "https://example.com/0a1b2c3d"

    def test_build_short_url_with_prefix(self):
        url = build_short_url(
            key="0a1b2c3d",
            base_url="https://example.com",
            path_prefix="/s/",
        )

        assert url == "https://example.com/s/0a1b2c3d"


class TestLogging:
    """Test logging setup."""

    def test_setup_logging_is_idempotent(self):
        logger = setup_logging(level="DEBUG")
        logger = setup_logging(level="WARNING")

        assert logger.name == "shortlinks"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_setup_logging_with_file(self, tmp_path):
        log_file = tmp_path / "service.log"
        logger = setup_logging(level="INFO", log_file=str(log_file), json_format=True)

        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()

        assert '"message": "hello"' in log_file.read_text()

        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    def test_get_logger_namespaces(self):
        assert get_logger().name == "shortlinks"
        assert get_logger("web").name == "shortlinks.web"
        assert get_logger("shortlinks.directory").name == "shortlinks.directory"
