from functools import cached_property

from pagelinks.core.enums import PageRole
from pagelinks.services.link_renderer import build_link, render_header
from pagelinks.services.page_windows import PageWindow, PageWindowSet, build_page_windows


class PageLinks:
    """Navigation links for one page of a collection.

    Windows are computed on first access, so bad coordinates or a malformed
    query surface from the method that needs them rather than from the
    constructor.
    """

    def __init__(self, base_url: str, raw_query: str, total: int, limit: int, offset: int) -> None:
        self._base_url = base_url
        self._raw_query = raw_query
        self._total = total
        self._limit = limit
        self._offset = offset

    @cached_property
    def windows(self) -> PageWindowSet:
        return build_page_windows(self._total, self._limit, self._offset)

    def _link(self, role: PageRole) -> str:
        return build_link(self._base_url, self._raw_query, self.windows.window(role).offset)

    def first_page_meta(self) -> PageWindow:
        return self.windows.first

    def first_page_link(self) -> str:
        return self._link(PageRole.FIRST)

    def has_prev_page(self) -> bool:
        return self.windows.has(PageRole.PREV)

    def prev_page_meta(self) -> PageWindow:
        return self.windows.window(PageRole.PREV)

    def prev_page_link(self) -> str:
        return self._link(PageRole.PREV)

    def has_next_page(self) -> bool:
        return self.windows.has(PageRole.NEXT)

    def next_page_meta(self) -> PageWindow:
        return self.windows.window(PageRole.NEXT)

    def next_page_link(self) -> str:
        return self._link(PageRole.NEXT)

    def last_page_meta(self) -> PageWindow:
        return self.windows.last

    def last_page_link(self) -> str:
        return self._link(PageRole.LAST)

    def to_header(self) -> str:
        return render_header(self.windows, self._base_url, self._raw_query)

    def as_dict(self) -> dict[str, str]:
        return {role.value: self._link(role) for role, _ in self.windows.present()}


def new_page_links(base_url: str, raw_query: str, total: int, limit: int, offset: int) -> PageLinks:
    return PageLinks(base_url, raw_query, total, limit, offset)
