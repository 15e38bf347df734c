"""Short URL construction from request headers and configuration."""

from typing import Mapping, Optional


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Case-insensitive header lookup; empty values count as missing."""
    name = name.lower()
    for key, value in headers.items():
        if key.lower() == name and value:
            return value.strip()
    return None


def build_base_url(
    headers: Mapping[str, str],
    fallback_base_url: str,
    request_scheme: Optional[str] = None,
    request_host: Optional[str] = None,
) -> str:
    """Build base URL from headers or fallback.

    Priority:
    1. X-Forwarded-Proto + X-Forwarded-Host
    2. Request scheme + host
    3. Fallback base URL from config

    Returns:
        Base URL without trailing slash (e.g., https://example.com)
    """
    proto = _header(headers, "x-forwarded-proto")
    host = _header(headers, "x-forwarded-host")
    if proto and host:
        # Proxies may append a chain: "https, http"
        return f"{proto.split(',')[0].strip()}://{host.split(',')[0].strip()}"

    if request_scheme and request_host:
        return f"{request_scheme}://{request_host}"

    return fallback_base_url.rstrip("/")


def get_path_prefix(headers: Mapping[str, str], configured_prefix: str = "") -> str:
    """Path prefix from X-Forwarded-Prefix, else the configured one.

    Returns:
        Prefix with a leading slash and no trailing slash, or ''
    """
    prefix = _header(headers, "x-forwarded-prefix") or configured_prefix or ""
    prefix = prefix.strip().strip("/")
    return "/" + prefix if prefix else ""


def build_short_url(short_code: str, base_url: str, path_prefix: str = "") -> str:
    """Join base URL, optional path prefix and short code."""
    prefix = path_prefix.strip("/")
    parts = [base_url.rstrip("/")]
    if prefix:
        parts.append(prefix)
    parts.append(short_code)
    return "/".join(parts)
