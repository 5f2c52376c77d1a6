"""Recovers a structured scam analysis from a free-text model completion.

Models often wrap the requested JSON in a markdown fence or surround it with
prose. The extractor looks for a ```json fence first, then any fence, then
falls back to the whole reply. Anything that does not parse to a JSON object
is replaced by the fixed fallback for the analysis mode, so callers always get
a dict they can persist and render.
"""
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from investours.schemas.internal_models import (
    AnalysisMode, QuickAnalysis, DeepAnalysis, QuickRiskLevel, DeepRiskLevel, Confidence, RESULT_MODELS
)
from investours.services.metrics_service import MetricsService

logger = logging.getLogger("ResponseExtractor")

FENCE = "```"
JSON_TAG = "json"


@dataclass(frozen=True)
class ExtractionOutcome:
    analysis: Dict[str, Any]
    parsed: bool


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def _fenced_block(raw_text: str, opener: str) -> Optional[str]:
    # First opener and the next closing fence after it; str.find keeps this linear.
    start = raw_text.find(opener)
    if start < 0:
        return None
    body_start = start + len(opener)
    end = raw_text.find(FENCE, body_start)
    if end < 0:
        return None
    return raw_text[body_start:end].strip()


def find_candidate(raw_text: str) -> str:
    block = _fenced_block(raw_text, FENCE + JSON_TAG)
    if block is None:
        block = _fenced_block(raw_text, FENCE)
    return block or raw_text


def fallback_analysis(mode: Union[AnalysisMode, str], raw_text: str) -> Dict[str, Any]:
    if AnalysisMode(mode) == AnalysisMode.DEEP:
        return DeepAnalysis(
            risk_score=50,
            risk_level=DeepRiskLevel.MEDIUM,
            summary="Unable to fully analyze. Please verify through official channels.",
            company_analysis=raw_text,
            red_flags=[],
            green_flags=[],
            regulatory_status="Unknown",
            similar_scams=[],
            recommendations=["Verify with local regulators", "Do thorough due diligence"],
            confidence=Confidence.LOW,
        ).to_payload()
    return QuickAnalysis(
        risk_level=QuickRiskLevel.WARNING,
        summary="Analysis incomplete. Please exercise caution and do additional research.",
        key_findings=["Could not complete full analysis"],
        recommendation="Verify this investment through official regulatory channels.",
    ).to_payload()


def _check_shape(mode: AnalysisMode, parsed: Dict[str, Any]):
    # Parsed replies are passed through untouched; drift is only reported.
    try:
        RESULT_MODELS[mode].model_validate(parsed)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        logger.warning(f"Model reply does not match {mode.value} shape: {fields}")
        MetricsService.record_extraction(mode.value, "schema_mismatch")


def extract_analysis(raw_text: str, mode: Union[AnalysisMode, str]) -> ExtractionOutcome:
    mode = AnalysisMode(mode)
    raw_text = raw_text if isinstance(raw_text, str) else ""
    candidate = find_candidate(raw_text)
    try:
        parsed = json.loads(candidate, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        logger.error(f"Failed to parse AI response ({type(e).__name__}): {raw_text[:500]}")
        parsed = None

    if isinstance(parsed, dict):
        _check_shape(mode, parsed)
        MetricsService.record_extraction(mode.value, "parsed")
        return ExtractionOutcome(analysis=parsed, parsed=True)

    if parsed is not None:
        logger.error(f"AI response parsed to {type(parsed).__name__}, expected object")
    MetricsService.record_extraction(mode.value, "fallback")
    return ExtractionOutcome(analysis=fallback_analysis(mode, raw_text), parsed=False)
