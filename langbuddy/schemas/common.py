"""Response envelopes and pagination bounds shared by every endpoint."""
from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

DataT = TypeVar("DataT")


class SuccessResponse(BaseModel, Generic[DataT]):
    """Success envelope wrapping an operation payload."""

    success: bool = True
    data: DataT


class EmptySuccessResponse(BaseModel):
    """Success envelope for operations without a payload."""

    success: bool = True
