"""URL helpers applied to a capture before its key is derived."""

from __future__ import annotations

from urllib.parse import SplitResult, parse_qsl, urlencode, urlsplit, urlunsplit

from packages.readdo_contracts.names import SourceType

_CAPTURE_SCHEMES = frozenset({"http", "https"})
_DEFAULT_PORTS = {"http": 80, "https": 443}
_TRACKING_PARAMS = frozenset({"fbclid", "gclid", "mc_eid", "mkt_tok"})
_TRACKING_PREFIX = "utm_"


def is_supported_capture_url(url: str | None) -> bool:
    """Return whether ``url`` is an absolute http(s) URL with a host."""
    parts = _split(url)
    return parts is not None and parts.scheme.lower() in _CAPTURE_SCHEMES and bool(parts.hostname)


def detect_source_type(url: str | None) -> SourceType:
    """Classify a capture URL by its host."""
    parts = _split(url)
    if parts is None:
        return SourceType.OTHER

    host = (parts.hostname or "").lower()
    if host == "youtu.be" or host == "youtube.com" or host.endswith(".youtube.com"):
        return SourceType.YOUTUBE
    if host == "substack.com" or host.endswith(".substack.com") or "newsletter" in host:
        return SourceType.NEWSLETTER
    if parts.scheme.lower() in _CAPTURE_SCHEMES:
        return SourceType.WEB
    return SourceType.OTHER


def canonicalize_url_for_capture(url: str) -> str:
    """Return a stable form of ``url`` so equivalent links derive one key.

    Scheme and host are lowercased, default ports and the fragment dropped,
    tracking parameters removed, and the remaining query sorted by key then
    value. Anything that is not an absolute URL is returned unchanged.
    """
    parts = _split(url)
    if parts is None or not parts.scheme or not parts.netloc:
        return url

    scheme = parts.scheme.lower()
    try:
        port = parts.port
    except ValueError:
        return url

    netloc = _host_for_netloc(parts.hostname or "")
    if parts.username is not None:
        userinfo = parts.username
        if parts.password is not None:
            userinfo = f"{userinfo}:{parts.password}"
        netloc = f"{userinfo}@{netloc}"
    if port is not None and _DEFAULT_PORTS.get(scheme) != port:
        netloc = f"{netloc}:{port}"

    path = parts.path
    if path == "" and scheme in _CAPTURE_SCHEMES:
        path = "/"

    params = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if not _is_tracking_param(key)
    ]
    query = urlencode(sorted(params, key=lambda item: item[0]))
    return urlunsplit((scheme, netloc, path, query, ""))


def _is_tracking_param(key: str) -> bool:
    lowered = key.lower()
    return lowered.startswith(_TRACKING_PREFIX) or lowered in _TRACKING_PARAMS


def _host_for_netloc(host: str) -> str:
    if ":" in host:
        return f"[{host}]"
    return host


def _split(url: str | None) -> SplitResult | None:
    if not url:
        return None
    try:
        return urlsplit(url.strip())
    except ValueError:
        return None
