from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Any, Optional


class ScamDetectionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    analysis: Dict[str, Any]
    analysis_type: str = Field(..., alias="analysisType")


class TutorResponse(BaseModel):
    response: str
    success: bool = True


class ErrorResponse(BaseModel):
    error: str


class SearchLogStats(BaseModel):
    total: int = 0
    quick: int = 0
    deep: int = 0
    successful: int = 0


class VettingIntentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_vetting_query: bool = Field(..., alias="isVettingQuery")
    suggested_route: Optional[str] = Field(default=None, alias="suggestedRoute")
