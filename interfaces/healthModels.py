from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from interfaces.analysisModels import Ingredient


class HealthMetric(BaseModel):
    """Lab-style measurement, e.g. fasting glucose with its reference interval."""
    reference_interval: Optional[str] = None
    result: Optional[float] = None
    units: Optional[str] = None


class HealthData(BaseModel):
    dietary_requirement: str = ""
    allergies: List[str] = Field(default_factory=list)
    health_conditions: List[str] = Field(default_factory=list)
    additional_health_data: Dict[str, HealthMetric] = Field(default_factory=dict)


class AnalysisRequest(BaseModel):
    """Body sent upstream when the user confirms the ingredient list."""
    health_data: HealthData
    ingredients: List[Ingredient]
