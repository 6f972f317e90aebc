from pydantic import BaseModel, Field
from typing import Optional, Dict
from enum import Enum


class Result(str, Enum):
    OK = "ok"
    FAILED = "failed"


class UrlMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class UrlRequest(BaseModel):
    url: str
    method: UrlMethod = UrlMethod.GET
    content: str = ""
    content_type: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)


class UrlResponse(BaseModel):
    url: str
    status_code: int  # 0 when the transport never produced a response
    body: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)
    error: Optional[str] = None
