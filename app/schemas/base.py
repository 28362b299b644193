# app/schemas/base.py
import math
from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

DEFAULT_STATUS_CODE = 200
DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 25

# Ids are BIGINT and the page offset must stay inside a signed 64-bit integer
MAX_ID = 2**63 - 1
MAX_PAGE_NUMBER = 2**31 - 1
MAX_PAGE_SIZE = 1000

DataT = TypeVar("DataT")

class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys on the wire"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

# ------------------------------------------------------------
# REQUESTS
# ------------------------------------------------------------
class Request(CamelModel):
    # Always overwritten by the endpoints, see app.api.deps.get_user_id
    user_id: str = ""

class PagedRequest(Request):
    page_number: int = Field(DEFAULT_PAGE_NUMBER, ge=1, le=MAX_PAGE_NUMBER)
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)

class EntityRequest(Request):
    id: int = Field(..., ge=1, le=MAX_ID)

# ------------------------------------------------------------
# RESPONSES
# ------------------------------------------------------------
class Response(CamelModel, Generic[DataT]):
    data: Optional[DataT] = None
    code: int = DEFAULT_STATUS_CODE
    message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.code <= 299

class PagedResponse(Response[List[DataT]], Generic[DataT]):
    total_count: int = 0
    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE

    @computed_field(alias="totalPages")
    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)
