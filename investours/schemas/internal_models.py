from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional


class AnalysisMode(str, Enum):
    QUICK = "quick"
    DEEP = "deep"


class QuickRiskLevel(str, Enum):
    SAFE = "safe"
    WARNING = "warning"
    DANGER = "danger"


class DeepRiskLevel(str, Enum):
    SAFE = "safe"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Confidence(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=True)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class QuickAnalysis(CamelModel):
    risk_level: QuickRiskLevel
    summary: str
    key_findings: List[str]
    recommendation: str


class DeepAnalysis(CamelModel):
    risk_score: int = Field(..., ge=0, le=100)
    risk_level: DeepRiskLevel
    summary: str
    company_analysis: str
    red_flags: List[str]
    green_flags: List[str]
    regulatory_status: str
    similar_scams: List[str]
    recommendations: List[str]
    confidence: Confidence


RESULT_MODELS = {
    AnalysisMode.QUICK: QuickAnalysis,
    AnalysisMode.DEEP: DeepAnalysis,
}


class AuditLogEntry(BaseModel):
    requester_id: Optional[str] = None
    query: str
    mode: str
    serialized_result: str
    succeeded: bool
    created_at: str


class WriteResult(BaseModel):
    ok: bool
    error: Optional[str] = None
