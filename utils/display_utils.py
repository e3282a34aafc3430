from interfaces.analysisModels import Classification

CLASSIFICATION_LABELS = {
    Classification.VERY_GOOD: "Very Good",
    Classification.GOOD: "Good",
    Classification.NEUTRAL: "Neutral",
    Classification.BAD: "Bad",
    Classification.VERY_BAD: "Very Bad",
}


def classification_label(classification: Classification) -> str:
    return CLASSIFICATION_LABELS.get(classification, "Unknown")


def verdict_title(safe_to_consume: bool) -> str:
    return "Safe to Consume" if safe_to_consume else "Consumption Warning"
