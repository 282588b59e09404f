from enum import Enum


class PageRole(str, Enum):
    FIRST = "first"
    PREV = "prev"
    NEXT = "next"
    LAST = "last"


HEADER_ORDER = (PageRole.FIRST, PageRole.PREV, PageRole.NEXT, PageRole.LAST)
