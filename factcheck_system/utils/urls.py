"""URL helpers shared by source scoring and prompt formatting."""

import re
from urllib.parse import unquote

# DuckDuckGo HTML results link through a redirect carrying the target in ``uddg``
_DUCKDUCKGO_REDIRECT_RE = re.compile(r"^(?:https?:)?//(?:www\.)?duckduckgo\.com/l/\?uddg=", re.IGNORECASE)


def clean_redirect_url(url: str) -> str:
    """
    Unwrap a DuckDuckGo redirect link to the target URL.

    Args:
        url: Result URL as returned by the provider

    Returns:
        Decoded target URL (``https://`` added when the target has no scheme),
        or ``url`` unchanged when it is not a redirect link
    """
    if not url:
        return url

    match = _DUCKDUCKGO_REDIRECT_RE.match(url.strip())
    if match is None:
        return url

    # The target is percent-encoded, so a bare "&" starts the redirect's own params
    target = unquote(url.strip()[match.end():].split("&")[0])
    if not target.startswith("http"):
        target = f"https://{target}"
    return target


__all__ = ["clean_redirect_url"]
