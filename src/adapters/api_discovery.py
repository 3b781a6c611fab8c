"""Locate the FTL API.

FTL publishes the URLs of its API as a CHAOS-class TXT record named
``local.api.ftl`` on its own DNS server, e.g.::

    local.api.ftl. 0 CH TXT "http://pi.hole:80/api/" "https://pi.hole:443/api/"

Each string is one candidate base URL, in preference order.
"""

from __future__ import annotations

import logging

import dns.exception
import dns.rdataclass
import dns.rdatatype
import dns.resolver

logger = logging.getLogger(__name__)

API_TXT_RECORD = "local.api.ftl"


def _build_resolver(server: str, timeout: float) -> dns.resolver.Resolver:
    resolver = dns.resolver.Resolver(configure=False)
    resolver.nameservers = [server]
    resolver.lifetime = timeout
    resolver.timeout = timeout
    return resolver


def discover_api_urls(server: str = "127.0.0.1", timeout: float = 2.0) -> list[str]:
    """Return the API base URLs announced by FTL, or `[]` when none can be read."""

    resolver = _build_resolver(server, timeout)
    try:
        answers = resolver.resolve(
            API_TXT_RECORD,
            dns.rdatatype.TXT,
            rdclass=dns.rdataclass.CH,
            raise_on_no_answer=False,
        )
    except dns.exception.DNSException as exc:
        logger.debug("API discovery via %s failed: %s", server, exc)
        return []

    urls: list[str] = []
    for rdata in answers:
        for chunk in rdata.strings:
            for url in chunk.decode("utf-8", errors="replace").split():
                url = url.strip('"')
                if url and url not in urls:
                    urls.append(url)

    logger.debug("Discovered API URLs: %s", urls)
    return urls
