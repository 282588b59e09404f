import logging
import re
from urllib.parse import quote_plus, unquote_plus

from pagelinks.services.page_windows import PageWindowSet
from pagelinks.utils.exceptions import QueryParseError

logger = logging.getLogger(__name__)

OFFSET_PARAM = "offset"

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _unescape(part: str) -> str:
    bad = _BAD_ESCAPE.search(part)
    if bad:
        raise QueryParseError(f"invalid URL escape {part[bad.start():bad.start() + 3]!r}")
    # surrogateescape keeps non-UTF-8 bytes intact through encode_query
    return unquote_plus(part, errors="surrogateescape")


def _escape(part: str) -> str:
    return quote_plus(part, safe="", errors="surrogateescape")


def parse_query(raw_query: str) -> dict[str, list[str]]:
    params: dict[str, list[str]] = {}
    for chunk in raw_query.split("&"):
        if not chunk:
            continue
        if ";" in chunk:
            raise QueryParseError("invalid semicolon separator in query")
        key, _, value = chunk.partition("=")
        params.setdefault(_unescape(key), []).append(_unescape(value))
    return params


def encode_query(params: dict[str, list[str]]) -> str:
    return "&".join(
        f"{_escape(key)}={_escape(value)}"
        for key in sorted(params)
        for value in params[key]
    )


def build_link(base_url: str, raw_query: str, offset: int) -> str:
    """Return ``base_url`` with ``raw_query`` attached and its offset replaced.

    Parameters are re-encoded sorted by key, so rendering the same query
    twice gives the same string.
    """
    try:
        params = parse_query(raw_query)
    except QueryParseError:
        logger.warning(f"Не удалось разобрать строку запроса. query={raw_query!r}")
        raise

    params[OFFSET_PARAM] = [str(offset)]
    if not base_url.endswith("?"):
        base_url += "?"
    return base_url + encode_query(params)


def render_header(windows: PageWindowSet, base_url: str, raw_query: str) -> str:
    return ", ".join(
        f'<{build_link(base_url, raw_query, window.offset)}>; rel="{role.value}"'
        for role, window in windows.present()
    )
