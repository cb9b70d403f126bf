from pydantic import BaseModel, ConfigDict
from typing import Any, Generic, Optional, TypeVar


T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Success envelope: {"success": true, "data": ...}"""
    success: bool = True
    data: T


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class SequenceEntry(BaseModel):
    """
    One row of a reorder batch as sent by the admin UI.

    Both fields are optional and loosely typed (numbers or numeric strings);
    normalization in app.crud.sequence decides what is usable.
    """
    model_config = ConfigDict(extra="ignore")

    id: Optional[Any] = None
    sequence: Optional[Any] = None


class SequenceUpdateResponse(BaseModel):
    success: bool = True
    message: str = "Sequence updated successfully"
    updated: int


def success_response(data: Any) -> APIResponse:
    return APIResponse(data=data)


def blank_to_none(value: Any) -> Any:
    """Form inputs send "" for a cleared optional field"""
    if isinstance(value, str) and not value.strip():
        return None
    return value
