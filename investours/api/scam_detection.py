from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
import logging
import time

from investours.schemas.request_schema import ScamDetectionRequest
from investours.schemas.response_schema import ScamDetectionResponse, ErrorResponse
from investours.engines.gateway_client import (
    GatewayClient, GatewayError, GatewayResponseError, GatewayUnavailableError
)
from investours.engines.prompts import analysis_messages
from investours.engines.response_extractor import extract_analysis
from investours.services.audit_logger import AuditLogger
from investours.services.metrics_service import MetricsService
from investours.middleware.observability import get_correlation_id
from investours.middleware.rate_limit import limiter, RATE_LIMIT
from investours.api.dependencies import get_gateway, get_audit_logger

router = APIRouter(tags=["scam-detection"])
logger = logging.getLogger("ScamDetectionAPI")

ENDPOINT = "/scam-detection"
ERROR_RESPONSES = {code: {"model": ErrorResponse} for code in (400, 402, 429, 500)}


def _error(status_code: int, message: str) -> JSONResponse:
    MetricsService.record_request(ENDPOINT, status_code)
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(ENDPOINT, response_model=ScamDetectionResponse, responses=ERROR_RESPONSES)
@limiter.limit(RATE_LIMIT)
def scam_detection(
    request: Request,
    payload: ScamDetectionRequest,
    gateway: GatewayClient = Depends(get_gateway),
    audit_logger: AuditLogger = Depends(get_audit_logger),
):
    correlation_id = get_correlation_id(request)
    mode = payload.analysis_type
    logger.info(f"[{correlation_id}] Processing {mode.value} analysis for: {payload.query}")

    try:
        content = gateway.complete(analysis_messages(payload.query, mode))
    except (GatewayResponseError, GatewayUnavailableError):
        return _error(500, "AI analysis failed")
    except GatewayError as e:
        return _error(e.status_code, e.message)

    if not content:
        logger.error(f"[{correlation_id}] No response from AI")
        return _error(500, "No response from AI")

    outcome = extract_analysis(content, mode)
    audit_logger.record_search(payload.user_id, payload.query, mode.value, outcome.analysis, outcome.parsed)

    logger.info(f"[{correlation_id}] Analysis complete for: {payload.query}")
    MetricsService.record_request(ENDPOINT, 200)
    return ScamDetectionResponse(analysis=outcome.analysis, analysis_type=mode.value)
