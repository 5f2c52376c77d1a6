from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Literal, Optional
from investours.schemas.internal_models import AnalysisMode


class ScamDetectionRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "query": "CryptoWealth Ltd promises 40% monthly returns",
                "analysisType": "quick",
                "userId": "8bcae408-5760-4bbc-ac9e-3f6190cff0aa"
            }
        }
    )

    query: Optional[str] = Field(default=None, validate_default=True)
    analysis_type: AnalysisMode = Field(default=AnalysisMode.QUICK, alias="analysisType")
    user_id: Optional[str] = Field(default=None, alias="userId")

    @field_validator("query")
    @classmethod
    def query_required(cls, value: Optional[str]) -> str:
        if value is None or not value.strip():
            raise ValueError("Query is required")
        return value.strip()

    @field_validator("analysis_type", mode="before")
    @classmethod
    def default_mode(cls, value):
        return AnalysisMode.QUICK if value is None else value


class ChatTurn(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class TutorRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    messages: List[ChatTurn] = Field(..., min_length=1)
    user_id: Optional[str] = Field(default=None, alias="userId")


class VettingIntentRequest(BaseModel):
    text: str
