"""Domain name normalization.

The lookup key sent to FTL is the ASCII-compatible (punycode) form of the
domain, lowercased. ASCII input that IDNA rejects (underscores, empty labels,
partial-search fragments like ``ads.``) is still a valid search term for FTL
and is only lowercased.
"""

from __future__ import annotations

import idna

from core.domain.errors import InvalidDomainError


def normalize_domain(raw_domain: str) -> str:
    """Return the canonical lookup key for `raw_domain`.

    Idempotent: ``normalize_domain(normalize_domain(x)) == normalize_domain(x)``.
    """

    domain = (raw_domain or "").strip()
    if not domain:
        raise InvalidDomainError("No domain specified")

    try:
        encoded = idna.encode(domain, uts46=True).decode("ascii")
    except idna.IDNAError as exc:
        if not domain.isascii():
            raise InvalidDomainError(f"Cannot convert '{raw_domain}' to IDNA: {exc}") from exc
        encoded = domain

    return encoded.lower()
