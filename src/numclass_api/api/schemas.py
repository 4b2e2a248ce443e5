"""Wire models for the HTTP surface; field names are the JSON keys."""

from pydantic import BaseModel


class NumberResponse(BaseModel):
    number: int
    is_prime: bool
    is_perfect: bool
    properties: list[str]
    digit_sum: int
    fun_fact: str


class ErrorResponse(BaseModel):
    number: str
    error: bool = True


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
