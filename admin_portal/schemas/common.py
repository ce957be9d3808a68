from datetime import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, HttpUrl, TypeAdapter
from pydantic import ValidationError as SchemaError

_http_url = TypeAdapter(HttpUrl)


def check_http_url(value: Optional[str]) -> Optional[str]:
    """Accept absolute http(s) URLs as submitted; empty strings are treated as unset."""
    if value is None or value == "":
        return None
    try:
        _http_url.validate_python(value)
    except SchemaError:
        raise ValueError("must be an http(s) URL")
    return value


HttpUrlStr = Annotated[str, AfterValidator(check_http_url)]


class EntityResponse(BaseModel):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CategorySummary(BaseModel):
    id: str
    name: str

    class Config:
        from_attributes = True


class BlogSummary(BaseModel):
    id: str
    title: str
    published: bool

    class Config:
        from_attributes = True
