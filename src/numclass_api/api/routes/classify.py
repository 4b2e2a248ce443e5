"""Number classification endpoint.

GET /api/classify-number?number=<raw>
    200 → NumberResponse
    400 → ErrorResponse (raw value echoed back)
"""

import asyncio
import logging

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool

from numclass_api.api.schemas import ErrorResponse, NumberResponse
from numclass_api.classify import classify
from numclass_api.utility import parse_int_strict

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["classify"])


@router.get(
    "/classify-number",
    response_model=NumberResponse,
    responses={400: {"model": ErrorResponse}},
)
async def classify_number(request: Request, number: str = ""):
    """Classify one integer and attach a fun fact about it."""
    state = request.app.state
    n = parse_int_strict(number, allow_negative=state.settings.allow_negative)

    # CPU-bound classification runs in the thread pool while the fact is fetched
    result, fact = await asyncio.gather(
        run_in_threadpool(classify, n, state.index),
        state.fact_provider.get(n),
    )
    logger.debug("Classified %d as %s", n, ",".join(result.properties), extra={"number": n})
    return result.with_fun_fact(fact).as_dict()
