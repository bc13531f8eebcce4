"""
Host header parsing utilities
"""

from typing import Iterable


def strip_port(host: str) -> str:
    """
    Remove the port from a Host header value.
    Bracketed IPv6 literals keep their address without the brackets.
    Case is preserved; tenant IDs are matched exactly.
    """
    host = host.strip()
    if host.startswith('['):
        end = host.find(']')
        return host[1:end] if end != -1 else host[1:]
    return host.split(':', 1)[0]


def extract_tenant_id(host: str) -> str:
    """
    Derive the tenant ID from a Host header value:
    the first label of the hostname, port removed.

    >>> extract_tenant_id("acme.example.com:8080")
    'acme'
    """
    return strip_port(host or '').split('.', 1)[0]


def is_loopback(host: str, aliases: Iterable[str]) -> bool:
    """
    True when the host (or its first label) names the bare application
    rather than a tenant subdomain
    """
    hostname = strip_port(host or '').lower()
    aliases = {alias.lower() for alias in aliases}
    return hostname in aliases or hostname.split('.', 1)[0] in aliases
