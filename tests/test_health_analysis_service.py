import unittest

from interfaces.analysisModels import Classification, HealthAnalysis
from services.errors import ParseFailure, UnprocessableResponse
from services.health_analysis_service import build_health_analysis
from services.impact_service import HIGH_HARM_IMPACT, NO_DATA_IMPACT

STRUCTURED_INGREDIENTS = [
    {
        "name": "High fructose corn syrup",
        "classification": "very_bad",
        "impacts": [{"metric": "blood sugar", "effect": "Sharp spike", "severity": "negative"}],
        "warnings": ["Not suitable for diabetics"],
        "recommendations": ["Choose unsweetened alternatives"],
    },
    {"name": "Whole grain oats", "classification": "very_good", "impacts": [], "warnings": [], "recommendations": []},
    {"name": "Salt", "classification": "neutral", "impacts": [], "warnings": [], "recommendations": []},
]


class TestHealthAnalysisService(unittest.TestCase):

    def test_structured_payload_round_trip(self):
        analysis = build_health_analysis({"ingredients": STRUCTURED_INGREDIENTS})

        self.assertIsInstance(analysis, HealthAnalysis)
        self.assertEqual(
            [i.classification.value for i in analysis.ingredients],
            [i["classification"] for i in STRUCTURED_INGREDIENTS],
        )
        self.assertEqual(analysis.ingredients[0].warnings, ["Not suitable for diabetics"])
        self.assertFalse(analysis.summary.safe_to_consume)
        self.assertEqual(analysis.summary.overall_impact, HIGH_HARM_IMPACT)

    def test_raw_analysis_with_newlines_and_control_characters(self):
        raw = '{\n  "ingredients": [\n    {"name": "Green\ttea", "classification": "good"}\r\n  ]\n}\x00'
        analysis = build_health_analysis({"raw_analysis": raw})

        self.assertEqual(analysis.ingredients[0].name, "Greentea")
        self.assertTrue(analysis.summary.safe_to_consume)

    def test_raw_analysis_takes_priority_over_ingredients(self):
        payload = {
            "raw_analysis": '{"ingredients": [{"name": "Spinach", "classification": "very_good"}]}',
            "ingredients": STRUCTURED_INGREDIENTS,
        }
        analysis = build_health_analysis(payload)
        self.assertEqual([i.name for i in analysis.ingredients], ["Spinach"])

    def test_truncated_raw_analysis_is_recovered(self):
        raw = '{"ingredients": [{"name": "Sugar", "classification": "bad"}, {"name": "Cocoa", "classification": "good"}, {"name": "Lec'
        analysis = build_health_analysis({"raw_analysis": raw})
        self.assertEqual([i.classification for i in analysis.ingredients], [Classification.BAD, Classification.GOOD])

    def test_unparseable_raw_analysis_falls_back_to_ingredients(self):
        payload = {"raw_analysis": "Sorry, the output was cut", "ingredients": STRUCTURED_INGREDIENTS}
        analysis = build_health_analysis(payload)
        self.assertEqual(len(analysis.ingredients), 3)

    def test_unparseable_raw_analysis_without_ingredients(self):
        with self.assertRaises(UnprocessableResponse) as ctx:
            build_health_analysis({"raw_analysis": "Sorry, the output was cut"})
        self.assertIsInstance(ctx.exception.__cause__, ParseFailure)

    def test_deeply_nested_raw_analysis_is_unprocessable(self):
        with self.assertRaises(UnprocessableResponse) as ctx:
            build_health_analysis({"raw_analysis": '{"ingredients": [' + "[" * 5000})
        self.assertIsInstance(ctx.exception.__cause__, ParseFailure)

    def test_neither_field_is_unprocessable(self):
        with self.assertRaises(UnprocessableResponse):
            build_health_analysis({"error": "upstream failed"})

    def test_invalid_direct_ingredients_is_unprocessable(self):
        with self.assertRaises(UnprocessableResponse):
            build_health_analysis({"ingredients": [{"name": "Salt"}]})

    def test_non_object_payload_is_unprocessable(self):
        with self.assertRaises(UnprocessableResponse):
            build_health_analysis(["not", "an", "object"])

    def test_empty_ingredient_list_is_valid(self):
        analysis = build_health_analysis({"ingredients": []})
        self.assertEqual(analysis.ingredients, [])
        self.assertEqual(analysis.summary.overall_impact, NO_DATA_IMPACT)

    def test_each_call_builds_a_new_analysis(self):
        payload = {"ingredients": STRUCTURED_INGREDIENTS}
        self.assertIsNot(build_health_analysis(payload), build_health_analysis(payload))


if __name__ == '__main__':
    unittest.main()
