import unittest

from interfaces.analysisModels import AnalyzedIngredient, Classification
from services.impact_service import (
    HEALTHY_IMPACT,
    HIGH_HARM_IMPACT,
    MODERATE_IMPACT,
    NO_DATA_IMPACT,
    classification_counts,
    determine_overall_impact,
    is_safe_to_consume,
    summarize_impact,
)


def make_ingredients(**counts):
    ingredients = []
    for classification, count in counts.items():
        for i in range(count):
            ingredients.append(AnalyzedIngredient(name=f"{classification}_{i}", classification=classification))
    return ingredients


class TestImpactService(unittest.TestCase):

    def test_high_harm_when_bad_share_exceeds_threshold(self):
        ingredients = make_ingredients(bad=4, neutral=6)
        self.assertEqual(determine_overall_impact(ingredients), HIGH_HARM_IMPACT)

    def test_bad_share_at_threshold_falls_through(self):
        ingredients = make_ingredients(bad=3, good=6, neutral=1)
        self.assertEqual(determine_overall_impact(ingredients), HEALTHY_IMPACT)

    def test_good_share_at_threshold_is_moderate(self):
        ingredients = make_ingredients(bad=3, very_good=2, good=3, neutral=2)
        self.assertEqual(determine_overall_impact(ingredients), MODERATE_IMPACT)

    def test_very_bad_counts_as_harmful(self):
        ingredients = make_ingredients(very_bad=1, good=1)
        self.assertEqual(determine_overall_impact(ingredients), HIGH_HARM_IMPACT)

    def test_neutral_counts_toward_neither_ratio(self):
        ingredients = make_ingredients(neutral=10)
        self.assertEqual(determine_overall_impact(ingredients), MODERATE_IMPACT)

    def test_empty_list_has_no_data_message(self):
        self.assertEqual(determine_overall_impact([]), NO_DATA_IMPACT)
        summary = summarize_impact([])
        self.assertEqual(summary.overall_impact, NO_DATA_IMPACT)
        self.assertTrue(summary.safe_to_consume)

    def test_bad_without_warnings_is_safe(self):
        self.assertTrue(is_safe_to_consume(make_ingredients(bad=4, neutral=6)))

    def test_single_very_bad_vetoes_safety(self):
        self.assertFalse(is_safe_to_consume(make_ingredients(very_good=9, very_bad=1)))

    def test_single_warning_vetoes_safety(self):
        ingredients = make_ingredients(very_good=5)
        ingredients.append(AnalyzedIngredient(name="Peanuts", classification="good", warnings=["Contains peanuts"]))
        self.assertFalse(is_safe_to_consume(ingredients))

    def test_classification_counts_include_empty_buckets(self):
        counts = classification_counts(make_ingredients(good=2, bad=1))
        self.assertEqual(counts[Classification.GOOD], 2)
        self.assertEqual(counts[Classification.BAD], 1)
        self.assertEqual(counts[Classification.VERY_BAD], 0)
        self.assertEqual(len(counts), 5)

    def test_summary_does_not_mutate_ingredients(self):
        ingredients = make_ingredients(good=2, very_bad=1)
        before = [i.model_dump() for i in ingredients]
        summarize_impact(ingredients)
        self.assertEqual([i.model_dump() for i in ingredients], before)


if __name__ == '__main__':
    unittest.main()
