from collections import Counter
from typing import Dict, List

from interfaces.analysisModels import AnalyzedIngredient, Classification, HealthSummary
from logger_manager import log_debug

# Policy thresholds, compared with strict inequalities
HARMFUL_RATIO = 0.3
BENEFICIAL_RATIO = 0.5

HIGH_HARM_IMPACT = "High number of potentially harmful ingredients detected. Consider alternatives."
HEALTHY_IMPACT = "Generally healthy composition with beneficial ingredients."
MODERATE_IMPACT = "Moderate nutritional value. Contains a mix of beneficial and less desirable ingredients."
NO_DATA_IMPACT = "No ingredients were analyzed. Unable to determine overall impact."


def classification_counts(ingredients: List[AnalyzedIngredient]) -> Dict[Classification, int]:
    counts = Counter(ingredient.classification for ingredient in ingredients)
    return {classification: counts.get(classification, 0) for classification in Classification}


def is_safe_to_consume(ingredients: List[AnalyzedIngredient]) -> bool:
    """A single very_bad ingredient or a single warning vetoes the whole product."""
    return not any(
        ingredient.classification == Classification.VERY_BAD or len(ingredient.warnings) > 0
        for ingredient in ingredients
    )


def determine_overall_impact(ingredients: List[AnalyzedIngredient]) -> str:
    total = len(ingredients)
    if total == 0:
        return NO_DATA_IMPACT

    # neutral counts toward neither ratio
    counts = classification_counts(ingredients)
    bad_count = counts[Classification.BAD] + counts[Classification.VERY_BAD]
    good_count = counts[Classification.GOOD] + counts[Classification.VERY_GOOD]

    if bad_count > total * HARMFUL_RATIO:
        return HIGH_HARM_IMPACT
    elif good_count > total * BENEFICIAL_RATIO:
        return HEALTHY_IMPACT
    else:
        return MODERATE_IMPACT


def summarize_impact(ingredients: List[AnalyzedIngredient]) -> HealthSummary:
    summary = HealthSummary(
        safe_to_consume=is_safe_to_consume(ingredients),
        overall_impact=determine_overall_impact(ingredients),
    )
    log_debug(f"Summarized {len(ingredients)} ingredients: safe_to_consume={summary.safe_to_consume}")
    return summary
