from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Any, Generic, List, Optional, TypeVar

T = TypeVar("T")


class TimestampModel(BaseModel):
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DataResponse(BaseModel, Generic[T]):
    data: T


class ErrorResponse(BaseModel):
    error: str


class FieldError(BaseModel):
    """Single failed validation rule, as returned to the client"""

    type: str = "field"
    value: Optional[Any] = None
    msg: str
    path: str
    location: str


class ValidationErrorResponse(BaseModel):
    errors: List[FieldError]
