"""API error response schemas."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    code: str


class UnknownEndpointDetail(BaseModel):
    message: str


class UnknownEndpointError(BaseModel):
    error: UnknownEndpointDetail
