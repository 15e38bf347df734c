"""Tests for common utilities."""

import logging

from tinylink.common.validators import normalize_url, is_valid_url, is_valid_short_code
from tinylink.common.urls import build_base_url, build_short_url, get_path_prefix
from tinylink.common.logging_config import setup_logging, get_logger


class TestValidators:
    """Test validation utilities."""

    def test_normalize_prepends_https(self):
        assert normalize_url("example.com/page") == "https://example.com/page"
        assert normalize_url("  example.com  ") == "https://example.com"

    def test_normalize_keeps_existing_scheme(self):
        assert normalize_url("http://example.com") == "http://example.com"
        assert normalize_url("HTTPS://Example.com") == "HTTPS://Example.com"

    def test_valid_urls(self):
        """Test valid URL validation."""
        for url in (
            "https://example.com",
            "http://example.com/path",
            "https://sub.example.com:8080/path?query=value",
            "https://my-site.co.uk/a/b.html#top",
        ):
            valid, error = is_valid_url(url)
            assert valid, f"{url}: {error}"

    def test_invalid_urls(self):
        """Test invalid URL validation."""
        valid, error = is_valid_url("")
        assert not valid
        assert error == "URL is required."

        for url in (
            "https://localhost",
            "https://example",
            "https://example.c",
            "https://127.0.0.1",
            "ftp://example.com",
            "https://exa mple.com",
            "https://example..com",
            "https://example.com:notaport",
            "https://" + "a" * 2048 + ".com",
        ):
            valid, error = is_valid_url(url)
            assert not valid, url
            assert error == "Please enter a valid URL."

    def test_valid_short_codes(self):
        """Test valid short code validation."""
        for code in ("abc123", "Summer24", "ABCDEFGH"):
            valid, _ = is_valid_short_code(code)
            assert valid, code

    def test_invalid_short_codes(self):
        """Test invalid short code validation."""
        for code in ("abc12", "abcdefghi", "abc-123", "abc_123", "abc 12", ""):
            valid, error = is_valid_short_code(code)
            assert not valid, code
            assert error == "Custom code must be 6-8 alphanumeric characters."

    def test_reserved_short_code(self):
        valid, error = is_valid_short_code("healthz")
        assert not valid
        assert "reserved" in error

    def test_reserved_check_is_case_sensitive(self):
        valid, error = is_valid_short_code("HEALTHZ")
        assert valid
        assert error == ""

    def test_custom_length_bounds_in_message(self):
        valid, error = is_valid_short_code("abc", min_length=4, max_length=10)
        assert not valid
        assert "4-10" in error


class TestURLs:
    """Test short URL construction."""

    def test_forwarded_headers_win(self):
        base = build_base_url(
            headers={"X-Forwarded-Proto": "https", "X-Forwarded-Host": "short.link"},
            fallback_base_url="http://localhost:9200",
            request_scheme="http",
            request_host="internal:9200",
        )
        assert base == "https://short.link"

    def test_forwarded_header_chain_uses_first_hop(self):
        base = build_base_url(
            headers={"x-forwarded-proto": "https, http", "x-forwarded-host": "a.example, b.internal"},
            fallback_base_url="http://localhost",
        )
        assert base == "https://a.example"

    def test_request_host_then_fallback(self):
        assert build_base_url({}, "http://fallback/", "http", "host:1") == "http://host:1"
        assert build_base_url({}, "http://fallback/") == "http://fallback"

    def test_path_prefix(self):
        assert get_path_prefix({"X-Forwarded-Prefix": "/u_s/"}) == "/u_s"
        assert get_path_prefix({}, "s") == "/s"
        assert get_path_prefix({}) == ""

    def test_build_short_url(self):
        assert build_short_url("abc123", "https://short.link/") == "https://short.link/abc123"
        assert build_short_url("abc123", "https://short.link", "/s/") == "https://short.link/s/abc123"


class TestLogging:
    def test_setup_logging_does_not_stack_handlers(self):
        setup_logging(level="INFO")
        logger = setup_logging(level="DEBUG")

        assert logger.name == "tinylink"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "tinylink.log"
        logger = setup_logging(level="INFO", log_file=str(log_file))
        logger.info("hello file")
        for handler in logger.handlers:
            handler.flush()

        assert "hello file" in log_file.read_text()
        setup_logging(level="INFO")

    def test_get_logger_namespaces(self):
        assert get_logger("web").name == "tinylink.web"
        assert get_logger("tinylink.storage").name == "tinylink.storage"
        assert get_logger().name == "tinylink"
