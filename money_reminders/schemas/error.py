from typing import Optional
from pydantic import BaseModel


class ValidationErrorResponse(BaseModel):
    """Body of a 400 response: the first failing field only"""
    message: str
    field: Optional[str] = None


class NotFoundResponse(BaseModel):
    message: str


class InternalErrorResponse(BaseModel):
    message: str
