from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class Classification(str, Enum):
    VERY_GOOD = "very_good"
    GOOD = "good"
    NEUTRAL = "neutral"
    BAD = "bad"
    VERY_BAD = "very_bad"


class Severity(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class Ingredient(BaseModel):
    """Candidate ingredient as detected on the label, editable before confirmation."""
    name: str
    amount: Optional[str] = None
    unit: Optional[str] = None

    @field_validator("amount", mode="before")
    @classmethod
    def amount_as_text(cls, value):
        # upstream sometimes sends the amount as a bare number
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class Impact(BaseModel):
    metric: str
    effect: str
    severity: Severity

    class Config:
        frozen = True


class AnalyzedIngredient(BaseModel):
    name: str
    classification: Classification
    impacts: List[Impact] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)

    class Config:
        frozen = True

    @field_validator("impacts", "warnings", "recommendations", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return [] if value is None else value


class HealthSummary(BaseModel):
    safe_to_consume: bool
    overall_impact: str


class HealthAnalysis(BaseModel):
    """Interpreted analysis response, rebuilt from scratch on every call."""
    ingredients: List[AnalyzedIngredient] = Field(default_factory=list)
    summary: HealthSummary


class HealthAnalysisResponse(HealthAnalysis):
    timestamp: str = Field(..., description="Timestamp of the response")
