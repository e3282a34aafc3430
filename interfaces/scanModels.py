from enum import Enum
from typing import List, Optional
from pydantic import BaseModel

from interfaces.analysisModels import Ingredient


class ScanType(str, Enum):
    INGREDIENT_LIST = "ingredient_list"
    FOOD_PHOTO = "food_photo"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ScanResponse(BaseModel):
    """Result of the upstream label/photo detection call."""
    type: ScanType
    ingredients: List[Ingredient]
    confidence: Confidence


class IngredientUpdate(BaseModel):
    name: Optional[str] = None
    amount: Optional[str] = None
    unit: Optional[str] = None


class IngredientListEdit(BaseModel):
    """Current ingredient list plus the change the user made to it."""
    ingredients: List[Ingredient]
    ingredient: Optional[Ingredient] = None
    update: Optional[IngredientUpdate] = None
