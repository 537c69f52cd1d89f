"""
URL and host utility functions for third-party classification.
"""

from __future__ import annotations

import re
from typing import Literal
from urllib import parse

ThirdPartyMatch = Literal["host", "root-domain"]

_TWO_PART_TLDS = frozenset([
    "co.uk", "com.au", "co.nz", "co.jp", "com.br",
    "co.in", "org.uk", "net.uk", "gov.uk",
])


def extract_host(url: str | None) -> str | None:
    """Extract the lowercased hostname from a URL string.

    Returns ``None`` when the URL is empty or has no host
    (e.g. a bare path or a ``data:`` URL).
    """
    if not url:
        return None
    try:
        return parse.urlparse(url).hostname
    except ValueError:
        return None


def get_root_domain(host: str) -> str:
    """Extract the registrable root domain from a full hostname.

    Handles common multi-part TLDs (e.g. ``co.uk``,
    ``com.au``) and strips a leading ``www.`` prefix.

    Args:
        host: A hostname like ``"www.example.co.uk"``.

    Returns:
        The root domain, e.g. ``"example.co.uk"``.
    """
    clean = re.sub(r"^www\.", "", host).lower()
    parts = clean.split(".")
    if len(parts) >= 2:
        last_two = ".".join(parts[-2:])
        if last_two in _TWO_PART_TLDS and len(parts) >= 3:
            return ".".join(parts[-3:])
        return last_two
    return clean


def is_third_party(request_url: str, page_host: str | None, match: ThirdPartyMatch = "host") -> bool:
    """Determine whether *request_url* is served from a third party.

    With ``match="host"`` any hostname differing from *page_host*
    counts as third-party; with ``match="root-domain"`` subdomains of
    the page's registrable domain stay first-party.

    A missing *page_host* or a request without a host is treated
    as first-party.
    """
    request_host = extract_host(request_url)
    if page_host is None or request_host is None:
        return False
    if match == "root-domain":
        return get_root_domain(request_host) != get_root_domain(page_host)
    return request_host != page_host.lower()
