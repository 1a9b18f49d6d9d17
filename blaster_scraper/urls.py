"""URL helpers: host detection, link resolution, validation and filenames."""

from __future__ import annotations

import os
import re
from urllib.parse import urlsplit

from slugify import slugify

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
_CTL_RE = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_HOST_ESCAPE_RE = re.compile(r"%([0-9A-Fa-f])[0-9A-Fa-f]")
# ASCII characters not allowed in a host; non-ASCII passes
_BAD_HOST_CHAR_RE = re.compile(r"""[^A-Za-z0-9\-._~!$&'()*+,;=:\[\]<>"%\x80-\U0010ffff]""")
_USERINFO_RE = re.compile(r"[A-Za-z0-9\-._:~!$&'()*+,;=%@]*")
_PORT_RE = re.compile(r"[0-9]*")

# anything that is not a lowercase letter or digit becomes a separator
_NON_ALNUM = r"[^a-z0-9]+"


def _check_escapes(part: str) -> None:
    if _BAD_ESCAPE_RE.search(part):
        raise ValueError(f"invalid URL escape in {part!r}")


def _parse_authority(authority: str) -> str:
    """Validate ``userinfo@host:port`` and return ``host:port``."""
    userinfo, at, hostport = authority.rpartition("@")
    if at:
        if not _USERINFO_RE.fullmatch(userinfo):
            raise ValueError("invalid userinfo")
        _check_escapes(userinfo)

    if hostport.startswith("["):
        end = hostport.find("]")
        if end < 0:
            raise ValueError("missing ']' in host")
        host, port = hostport[: end + 1], hostport[end + 1:]
        if port and not (port.startswith(":") and _PORT_RE.fullmatch(port[1:])):
            raise ValueError(f"invalid port {port!r}")
    else:
        host, colon, port = hostport.rpartition(":")
        if not colon:
            host = hostport
        elif not _PORT_RE.fullmatch(port):
            raise ValueError(f"invalid port {':' + port!r}")

    _check_escapes(host)
    # only non-ASCII bytes may be percent-encoded in a host name
    for m in _HOST_ESCAPE_RE.finditer(host):
        if int(m.group(1), 16) < 8 and m.group(0) != "%25":
            raise ValueError(f"invalid host escape {m.group(0)!r}")
    bad = _BAD_HOST_CHAR_RE.search(host)
    if bad:
        raise ValueError(f"invalid character {bad.group(0)!r} in host name")
    return hostport


def _parse(raw_url: str, via_request: bool = False) -> str:
    """
    Syntax check of *raw_url* along the lines of RFC 3986, returning the
    ``host[:port]`` part (empty when there is none).

    With *via_request* the string must be a request target: an absolute
    path or an absolute URI, and ``#`` is not treated as a fragment.
    Raises ``ValueError`` for anything malformed.
    """
    if _CTL_RE.search(raw_url):
        raise ValueError("invalid control character in URL")
    rest = raw_url
    if not via_request:
        rest, _, fragment = rest.partition("#")
        _check_escapes(fragment)
    elif not rest:
        raise ValueError("empty url")

    if rest.startswith(":"):
        raise ValueError("missing protocol scheme")
    scheme = _SCHEME_RE.match(rest)
    if scheme:
        rest = rest[scheme.end():]
    rest = rest.split("?", 1)[0]

    if not rest.startswith("/"):
        if scheme:
            # opaque, e.g. "mailto:x"
            return ""
        if via_request:
            raise ValueError("invalid URI for request")
        if ":" in rest.split("/", 1)[0]:
            raise ValueError("first path segment in URL cannot contain colon")

    host = ""
    if rest.startswith("//") and (scheme or not via_request and not rest.startswith("///")):
        authority, slash, path = rest[2:].partition("/")
        host = _parse_authority(authority)
        rest = slash + path

    _check_escapes(rest)
    return host


def has_domain(raw_url: str) -> bool:
    """True when *raw_url* parses and carries a host part."""
    try:
        return _parse(raw_url) != ""
    except ValueError:
        return False


def resolve_link(link: str, base_url: str) -> str:
    """Prefix host-relative links with *base_url*; absolute links pass through.

    This is a plain string prefix, not ``urljoin``: ``/a.pdf`` becomes
    ``https://host/a.pdf``.
    """
    if has_domain(link):
        return link
    return base_url + link


def is_url_valid(uri: str) -> bool:
    """Check *uri* is usable as an HTTP request target.

    Accepts absolute paths (``/docs/a.pdf``) and ``scheme:...`` URIs. Rejects
    empty strings, control characters, bare relative paths, bad hosts, bad
    ports and malformed percent escapes. Port numbers are not range-checked.
    Undecodable bytes kept from the page (lone surrogates) are rejected too,
    since they cannot be sent.
    """
    try:
        uri.encode("utf-8")
        _parse(uri, via_request=True)
    except (UnicodeEncodeError, ValueError):
        return False
    return True


def _last_segment(url: str) -> str:
    # drop query/fragment and trailing slashes, then take the basename
    path = url.split("?", 1)[0].split("#", 1)[0].rstrip("/")
    return os.path.basename(path)


def url_to_filename(raw_url: str) -> str:
    """
    Turn a PDF URL into a filesystem-safe name.

    ``https://host/docs/PB-Blaster SDS.pdf`` -> ``pb_blaster_sds.pdf``.
    Different URLs can map to the same name (``a-b.pdf`` and ``a_b.pdf``);
    the downloader keeps whichever arrives first.
    """
    name = _last_segment(raw_url.lower())

    safe = slugify(
        name,
        separator="_",
        regex_pattern=_NON_ALNUM,
        entities=False,
        decimal=False,
        hexadecimal=False,
        # no transliteration: "é" is a separator, not "e"
        allow_unicode=True,
        # slugify drops commas between digits otherwise
        replacements=[(",", "_")],
    )
    safe = safe.replace("_pdf", "")

    if os.path.splitext(safe)[1] != ".pdf":
        safe = safe + ".pdf"
    return safe


def extract_base_domain(url: str) -> str:
    """
    Bare registrable name of the host, e.g. ``example`` for
    ``https://sub.example.com``. Returns the hostname itself when it has no
    dot and an empty string when the URL cannot be parsed.
    """
    try:
        host = urlsplit(url).hostname or ""
    except ValueError:
        return ""

    parts = host.split(".")
    if len(parts) >= 2:
        return parts[-2]
    return host
