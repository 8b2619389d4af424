"""Arithmetic routes. Publicly accessible without authentication."""

from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from api.models import DecimalInt
from services.arithmetic_service import INT32_MAX, INT32_MIN, wrapping_sum

router = APIRouter(prefix="/math", tags=["math"])


@router.get("/sum", response_class=PlainTextResponse)
async def sum_numbers(
    a: Annotated[DecimalInt, Query(ge=INT32_MIN, le=INT32_MAX, description="First integer value", examples=[5])],
    b: Annotated[DecimalInt, Query(ge=INT32_MIN, le=INT32_MAX, description="Second integer value", examples=[10])],
):
    """Calculate sum of two integers.

    Overflow wraps around using 32-bit signed arithmetic.
    """
    return PlainTextResponse(str(wrapping_sum(a, b)))
