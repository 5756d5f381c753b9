"""
Error response models.

Every error the API returns has the same shape, whatever raised it.
These models only document that shape in the OpenAPI schema.
"""

from typing import Union

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    statusCode: int = Field(..., examples=[401])
    message: str = Field(..., examples=["Unauthorized"])
    error: str = Field(..., examples=["Unauthorized"])


class ValidationErrorResponse(BaseModel):
    """Validation error response format (one message per invalid field)."""

    statusCode: int = Field(400, examples=[400])
    message: Union[list[str], str] = Field(..., examples=[["password: String should have at least 6 characters"]])
    error: str = Field("Bad Request", examples=["Bad Request"])


# Shorthand for route ``responses=`` declarations
UNAUTHORIZED = {401: {"model": ErrorResponse, "description": "Missing or invalid bearer token"}}
FORBIDDEN = {403: {"model": ErrorResponse, "description": "Authenticated but not the owner"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Resource not found"}}
CONFLICT = {409: {"model": ErrorResponse, "description": "Email already exists"}}
BAD_REQUEST = {400: {"model": ValidationErrorResponse, "description": "Validation failed"}}
