from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from interfaces.analysisModels import Ingredient
from interfaces.healthModels import AnalysisRequest, HealthData
from interfaces.scanModels import IngredientUpdate, ScanResponse
from logger_manager import log_error, log_info
from services.errors import InvalidScanResponse


def parse_scan_response(data: Dict[str, Any]) -> ScanResponse:
    """Validate the detection response before showing it for confirmation."""
    try:
        scan = ScanResponse.model_validate(data)
    except ValidationError as e:
        log_error(f"Invalid scan response: {e.error_count()} error(s)")
        raise InvalidScanResponse("Invalid response format") from e
    log_info(f"Scan detected {len(scan.ingredients)} ingredients ({scan.type.value}, {scan.confidence.value} confidence)")
    return scan


def add_ingredient(ingredients: List[Ingredient], name: str = "", amount: Optional[str] = None, unit: Optional[str] = None) -> List[Ingredient]:
    return [*ingredients, Ingredient(name=name, amount=amount, unit=unit)]


def update_ingredient(ingredients: List[Ingredient], index: int, update: IngredientUpdate) -> List[Ingredient]:
    """Replace the fields set on ``update`` for the ingredient at ``index``."""
    _check_index(ingredients, index)
    changes = update.model_dump(exclude_unset=True)
    if changes.get("name") is None:
        changes.pop("name", None)
    updated = list(ingredients)
    updated[index] = ingredients[index].model_copy(update=changes)
    return updated


def remove_ingredient(ingredients: List[Ingredient], index: int) -> List[Ingredient]:
    _check_index(ingredients, index)
    return ingredients[:index] + ingredients[index + 1:]


def _check_index(ingredients: List[Ingredient], index: int):
    # negative positions are not meaningful for the editor
    if not 0 <= index < len(ingredients):
        raise IndexError(f"No ingredient at position {index}")


def build_analysis_request(health_data: HealthData, ingredients: List[Ingredient]) -> AnalysisRequest:
    log_info(f"Building analysis request for {len(ingredients)} ingredients")
    return AnalysisRequest(health_data=health_data, ingredients=ingredients)
