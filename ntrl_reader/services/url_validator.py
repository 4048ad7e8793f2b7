# ntrl_reader/services/url_validator.py
"""
Article URL validation for reader mode.

Checks a URL's structure before it is fetched: blocked schemes, embedded
credentials, protocol, and private/loopback hosts. No network access is
made here; reachability is discovered by the fetch itself.

Usage:
    result = validate_article_url("https://apnews.com/article/abc")
    if not result.valid:
        print(result.reason)
"""

import ipaddress
import re
from dataclasses import dataclass
from enum import Enum
from urllib.parse import SplitResult, urlsplit


class URLRejectReason(str, Enum):
    """Why a URL was rejected."""
    INVALID_URL = "invalid_url"
    INVALID_PROTOCOL = "invalid_protocol"
    DOMAIN_NOT_ALLOWED = "domain_not_allowed"
    BLOCKED_PATTERN = "blocked_pattern"


# Known news publishers. Used for monitoring only; fetching is not restricted to it.
ALLOWED_NEWS_DOMAINS = [
    # Major wire services
    "apnews.com",
    "reuters.com",
    "afp.com",
    # US national news
    "npr.org",
    "pbs.org",
    "cbsnews.com",
    "nbcnews.com",
    "abcnews.go.com",
    # Major US newspapers
    "nytimes.com",
    "washingtonpost.com",
    "wsj.com",
    "latimes.com",
    "chicagotribune.com",
    "usatoday.com",
    # Other US news
    "foxnews.com",
    "nypost.com",
    "politico.com",
    "thehill.com",
    # International
    "bbc.com",
    "bbc.co.uk",
    "theguardian.com",
    "economist.com",
    "ft.com",
    "aljazeera.com",
    "dw.com",
    # Tech news
    "arstechnica.com",
    "theverge.com",
    "wired.com",
    "techcrunch.com",
    # Business
    "bloomberg.com",
    "cnbc.com",
    "marketwatch.com",
    "fortune.com",
]

# Blocked regardless of domain
BLOCKED_PATTERNS = [
    re.compile(r"^javascript:", re.IGNORECASE),
    re.compile(r"^data:", re.IGNORECASE),
    re.compile(r"^file:", re.IGNORECASE),
    re.compile(r"^ftp:", re.IGNORECASE),
    re.compile(r"^mailto:", re.IGNORECASE),
    re.compile(r"^tel:", re.IGNORECASE),
    # URLs with credentials
    re.compile(r"://[^/]*@"),
]

_LOCAL_HOSTNAMES = {"localhost", "127.0.0.1", "::1"}


@dataclass
class URLValidationResult:
    """Result from validating a single URL."""

    valid: bool
    reason: URLRejectReason | None = None
    hostname: str | None = None


def _is_private_ip(host: str) -> bool:
    """Check if a literal IP host is in a private/reserved range."""
    try:
        addr = ipaddress.ip_address(host)
        return addr.is_private or addr.is_loopback or addr.is_link_local or addr.is_reserved
    except ValueError:
        return False


def _is_domain_allowed(hostname: str, allowed_domains: list[str]) -> bool:
    """Exact or subdomain match ("www.bbc.com" matches "bbc.com")."""
    hostname = hostname.lower()
    for domain in allowed_domains:
        domain = domain.lower()
        if hostname == domain or hostname.endswith(f".{domain}"):
            return True
    return False


def _parse(url: str) -> SplitResult | None:
    try:
        parsed = urlsplit(url)
        # Accessing port validates it
        parsed.port
    except ValueError:
        return None
    return parsed


def validate_article_url(
    url: str | None,
    allowed_domains: list[str] | None = None,
    require_https: bool = False,
    allow_localhost: bool = False,
    skip_domain_check: bool = True,
) -> URLValidationResult:
    """
    Validate a URL for fetching.

    Args:
        url: The URL to validate
        allowed_domains: Whitelist used when skip_domain_check is False
        require_https: Reject plain http
        allow_localhost: Accept localhost and private IP hosts
        skip_domain_check: Accept any public domain (reader-mode default)

    Returns:
        URLValidationResult with the rejection reason, if any
    """
    if not url or not url.strip():
        return URLValidationResult(valid=False, reason=URLRejectReason.INVALID_URL)

    for pattern in BLOCKED_PATTERNS:
        if pattern.search(url):
            return URLValidationResult(valid=False, reason=URLRejectReason.BLOCKED_PATTERN)

    parsed = _parse(url.strip())
    if parsed is None or not parsed.scheme:
        return URLValidationResult(valid=False, reason=URLRejectReason.INVALID_URL)

    valid_schemes = {"https"} if require_https else {"http", "https"}
    if parsed.scheme.lower() not in valid_schemes:
        return URLValidationResult(valid=False, reason=URLRejectReason.INVALID_PROTOCOL)

    hostname = parsed.hostname
    if not hostname:
        return URLValidationResult(valid=False, reason=URLRejectReason.INVALID_URL)

    if hostname in _LOCAL_HOSTNAMES or _is_private_ip(hostname):
        if not allow_localhost:
            return URLValidationResult(valid=False, reason=URLRejectReason.DOMAIN_NOT_ALLOWED, hostname=hostname)
        return URLValidationResult(valid=True, hostname=hostname)

    if not skip_domain_check and not _is_domain_allowed(hostname, allowed_domains or ALLOWED_NEWS_DOMAINS):
        return URLValidationResult(valid=False, reason=URLRejectReason.DOMAIN_NOT_ALLOWED, hostname=hostname)

    return URLValidationResult(valid=True, hostname=hostname)


def is_allowed_news_domain(url: str | None) -> bool:
    """Check if a URL is from a known news publisher."""
    return validate_article_url(url, skip_domain_check=False).valid
