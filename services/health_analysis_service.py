from typing import Any, Dict, List, Optional

from interfaces.analysisModels import AnalyzedIngredient, HealthAnalysis
from logger_manager import log_error, log_info, log_warning
from services.errors import ParseFailure, UnprocessableResponse
from services.impact_service import summarize_impact
from utils.response_utils import extract_ingredients, normalize_response, validate_ingredients


def assemble_health_analysis(ingredients: List[AnalyzedIngredient]) -> HealthAnalysis:
    return HealthAnalysis(ingredients=ingredients, summary=summarize_impact(ingredients))


def build_health_analysis(payload: Dict[str, Any]) -> HealthAnalysis:
    """
    Interpret a raw analysis response into a HealthAnalysis.

    The embedded ``raw_analysis`` string wins when it can be parsed. Otherwise
    a direct ``ingredients`` field on the payload is used.

    Args:
        payload: Decoded response body from the analysis service.

    Returns:
        A freshly built HealthAnalysis.

    Raises:
        UnprocessableResponse: when no path yields ingredients. A failed
            raw_analysis parse is chained as the cause.
    """
    if not isinstance(payload, dict):
        log_error(f"Analysis response is {type(payload).__name__}, expected an object")
        raise UnprocessableResponse("Analysis response is not an object")

    parse_error: Optional[ParseFailure] = None

    raw_analysis = payload.get("raw_analysis")
    if isinstance(raw_analysis, str) and raw_analysis:
        try:
            ingredients = extract_ingredients(normalize_response(raw_analysis))
            log_info(f"Parsed {len(ingredients)} ingredients from raw analysis")
            return assemble_health_analysis(ingredients)
        except ParseFailure as e:
            log_warning(f"Failed to parse raw analysis: {e}")
            parse_error = e

    if payload.get("ingredients") is not None:
        result = validate_ingredients("direct", payload["ingredients"])
        if result.ok:
            log_info(f"Using {len(result.ingredients)} ingredients from response body")
            return assemble_health_analysis(result.ingredients)
        log_warning(f"Direct ingredients rejected: {result.error}")

    log_error("Unable to parse ingredients data")
    raise UnprocessableResponse("Unable to parse ingredients data") from parse_error
