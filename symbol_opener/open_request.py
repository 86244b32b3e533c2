"""Parse ``symbol-opener://open?symbol=...&cwd=...&kind=...`` URIs."""

from dataclasses import dataclass
from urllib.parse import parse_qsl, unquote, urlsplit


@dataclass(frozen=True)
class OpenRequest:
    """Parameters carried by an open-symbol URI. Values may be missing."""

    symbol: str | None
    cwd: str | None
    kind: str | None = None


def parse_open_uri(uri: str) -> OpenRequest:
    """Extract symbol, cwd and kind from a URI's query string."""
    # macOS `open` double-encodes the query string.
    decoded = unquote(urlsplit(uri).query)
    params = dict(parse_qsl(decoded, keep_blank_values=True))
    return OpenRequest(
        symbol=params.get("symbol") or None,
        cwd=params.get("cwd") or None,
        kind=params.get("kind") or None,
    )
