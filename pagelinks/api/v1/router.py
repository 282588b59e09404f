from fastapi import APIRouter
from pagelinks.api.v1.page_links import router as page_links_router

router = APIRouter(prefix="/api/v1")
router.include_router(page_links_router)
