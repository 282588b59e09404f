import logging

from fastapi import APIRouter, Depends, Query, Request, Response

from pagelinks.api.deps import pagination_params, set_pagination_headers
from pagelinks.schemas.page_links import PageLinksRead, PageWindowRead
from pagelinks.services.page_windows import page_count
from pagelinks.utils.pagination import PaginationRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/page-links", tags=["page-links"])


@router.get("", response_model=PageLinksRead)
def preview_page_links(
    request: Request,
    response: Response,
    total: int = Query(ge=0),
    pagination: PaginationRequest = Depends(pagination_params),
) -> PageLinksRead:
    links = set_pagination_headers(response, request, total, pagination.limit, pagination.offset)
    logger.debug(f"Ссылки страниц построены. total={total} {pagination}")
    return PageLinksRead(
        total=total,
        limit=pagination.limit,
        offset=pagination.offset,
        sort=pagination.sort,
        pages=page_count(total, pagination.limit),
        windows={role.value: PageWindowRead.model_validate(w) for role, w in links.windows.present()},
        links=links.as_dict(),
    )
