from typing import Optional

from fastapi import Query, Request, Response

from pagelinks.core.config import settings
from pagelinks.services.page_links import PageLinks, new_page_links
from pagelinks.utils.pagination import PaginationRequest


def pagination_params(
    limit: Optional[int] = Query(default=None),
    offset: Optional[int] = Query(default=None),
    sort: Optional[str] = Query(default=None),
) -> PaginationRequest:
    return PaginationRequest.from_args(limit, offset, sort, bounds=settings.limit_bounds)


def set_pagination_headers(
    response: Response, request: Request, total: int, limit: int, offset: int
) -> PageLinks:
    """Set the ``Link`` and ``X-Total-Count`` headers for a page of results."""
    base_url = str(request.url.replace(query=""))
    links = new_page_links(base_url, request.url.query, total, limit, offset)
    response.headers["Link"] = links.to_header()
    response.headers["X-Total-Count"] = str(total)
    return links
