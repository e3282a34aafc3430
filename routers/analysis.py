from datetime import datetime
from typing import Any, Dict, List

import pytz
from fastapi import APIRouter, Body, HTTPException

from env import TIMEZONE
from interfaces.analysisModels import HealthAnalysisResponse, Ingredient
from interfaces.healthModels import AnalysisRequest
from interfaces.scanModels import IngredientListEdit, ScanResponse
from logger_manager import log_error, log_info
from services.errors import HealthAnalysisError, InvalidScanResponse
from services.health_analysis_service import build_health_analysis
from services.impact_service import classification_counts
from services.scan_service import (
    add_ingredient,
    build_analysis_request,
    parse_scan_response,
    remove_ingredient,
    update_ingredient,
)
from utils.display_utils import classification_label, verdict_title

ANALYSIS_FAILED_DETAIL = "Failed to process ingredient analysis. Please try again."

router = APIRouter()


@router.post("/interpret", response_model=HealthAnalysisResponse)
async def interpret_analysis_endpoint(payload: Dict[str, Any] = Body(...)):
    """
    Turns the analysis service's response into a HealthAnalysis.
    """
    log_info(f"Received analysis response with keys: {sorted(payload.keys())}")
    try:
        analysis = build_health_analysis(payload)
    except HealthAnalysisError as e:
        log_error(f"Error interpreting analysis response: {e}", e)
        raise HTTPException(status_code=422, detail=ANALYSIS_FAILED_DETAIL)

    breakdown = ", ".join(
        f"{classification_label(classification)}: {count}"
        for classification, count in classification_counts(analysis.ingredients).items()
        if count
    )
    log_info(f"Analysis interpreted: {verdict_title(analysis.summary.safe_to_consume)} ({breakdown or 'no ingredients'})")
    return HealthAnalysisResponse(
        ingredients=analysis.ingredients,
        summary=analysis.summary,
        timestamp=datetime.now(tz=pytz.timezone(TIMEZONE)).isoformat()
    )


@router.post("/request", response_model=AnalysisRequest)
async def analysis_request_endpoint(body: AnalysisRequest):
    return build_analysis_request(body.health_data, body.ingredients)


@router.post("/scan", response_model=ScanResponse)
async def validate_scan_endpoint(data: Dict[str, Any] = Body(...)):
    try:
        return parse_scan_response(data)
    except InvalidScanResponse as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/ingredients/add", response_model=List[Ingredient])
async def add_ingredient_endpoint(body: IngredientListEdit):
    new = body.ingredient or Ingredient(name="")
    return add_ingredient(body.ingredients, name=new.name, amount=new.amount, unit=new.unit)


@router.post("/ingredients/{index}/update", response_model=List[Ingredient])
async def update_ingredient_endpoint(index: int, body: IngredientListEdit):
    if body.update is None:
        raise HTTPException(status_code=422, detail="No update provided")
    try:
        return update_ingredient(body.ingredients, index, body.update)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/ingredients/{index}/remove", response_model=List[Ingredient])
async def remove_ingredient_endpoint(index: int, body: IngredientListEdit):
    try:
        return remove_ingredient(body.ingredients, index)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
