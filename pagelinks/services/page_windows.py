import logging
from dataclasses import dataclass
from typing import Iterator

from pagelinks.core.enums import HEADER_ORDER, PageRole
from pagelinks.utils.exceptions import NoSuchPageError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageWindow:
    limit: int
    offset: int


@dataclass(frozen=True)
class PageWindowSet:
    """Windows of the pages adjacent to the current one.

    ``first`` and ``last`` always exist. ``prev`` and ``next`` are ``None``
    when there is no such page.
    """

    first: PageWindow
    last: PageWindow
    prev: PageWindow | None = None
    next: PageWindow | None = None

    def get(self, role: PageRole) -> PageWindow | None:
        return getattr(self, PageRole(role).value)

    def has(self, role: PageRole) -> bool:
        return self.get(role) is not None

    def window(self, role: PageRole) -> PageWindow:
        w = self.get(role)
        if w is None:
            raise NoSuchPageError(f"Pagination has no {PageRole(role).value} page")
        return w

    def present(self) -> Iterator[tuple[PageRole, PageWindow]]:
        for role in HEADER_ORDER:
            w = self.get(role)
            if w is not None:
                yield role, w


def _require_limit(limit: int) -> None:
    if limit < 1:
        raise ValidationError(f"limit must be positive. limit={limit}")


def last_offset(total: int, limit: int) -> int:
    """Offset of the final page.

    An empty collection still has one page, starting at 0.
    """
    _require_limit(limit)
    pages, rest = divmod(total, limit)
    if rest == 0:
        return max(0, (pages - 1) * limit)
    return pages * limit


def build_page_windows(total: int, limit: int, offset: int) -> PageWindowSet:
    _require_limit(limit)
    if total < 0:
        raise ValidationError(f"total cannot be negative. total={total}")
    if offset < 0:
        raise ValidationError(f"offset cannot be negative. offset={offset}")

    prev = None
    if 0 < offset < total and offset - limit >= 0:
        prev = PageWindow(limit=limit, offset=max(0, offset - limit))

    nxt = None
    if total >= limit + offset:
        nxt = PageWindow(limit=limit, offset=offset + limit)

    windows = PageWindowSet(
        first=PageWindow(limit=limit, offset=0),
        last=PageWindow(limit=limit, offset=last_offset(total, limit)),
        prev=prev,
        next=nxt,
    )
    logger.debug(f"Окна страниц посчитаны. total={total} limit={limit} offset={offset} windows={windows}")
    return windows


def page_count(count: int, limit: int) -> int:
    _require_limit(limit)
    if count == 0:
        return 1
    pages, rest = divmod(count, limit)
    return pages + 1 if rest else pages
