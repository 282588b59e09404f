from pydantic import BaseModel, ConfigDict, Field


class PageWindowRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    limit: int
    offset: int


class PageLinksRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    limit: int
    offset: int
    sort: str
    pages: int
    windows: dict[str, PageWindowRead]
    links: dict[str, str] = Field(alias="_links")
