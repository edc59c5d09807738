import pytest

from models import (
    Confidence,
    DetectedItem,
    MaterialEntry,
    MaterialStatus,
    OverallStatus,
    RecyclingRules,
)
from services.material_comparison import (
    best_vocabulary_match,
    build_vocabulary,
    compare_materials,
)


@pytest.fixture
def rules():
    return RecyclingRules(
        location="Beverly Hills, CA",
        accepted=[
            MaterialEntry(material="Plastic Bottles", notes="Rinse before recycling",
                          confidence=Confidence.HIGH, source_count=2),
            MaterialEntry(material="Cardboard", notes="Flatten",
                          confidence=Confidence.HIGH, source_count=2),
        ],
        not_accepted=[
            MaterialEntry(material="Plastic Bags", notes="Return to grocery store drop-off",
                          confidence=Confidence.MEDIUM, source_count=1),
        ],
        tips=["Rinse containers before recycling"],
    )


def _only_material(comparison):
    assert len(comparison.items) == 1
    assert len(comparison.items[0].materials) == 1
    return comparison.items[0].materials[0]


class TestClassification:

    def test_specific_accepted_match_beats_generic_rejection(self, rules):
        comparison = compare_materials([{"name": "plastic bottle", "materials": ["plastic"]}], rules)
        result = _only_material(comparison)

        assert result.status == MaterialStatus.RECYCLABLE
        assert result.recyclable is True
        assert result.notes == "Rinse before recycling"
        assert comparison.items[0].overall_status == OverallStatus.RECYCLABLE

    def test_specific_rejection_beats_generic_acceptance(self, rules):
        comparison = compare_materials([{"name": "plastic bag", "materials": ["plastic"]}], rules)
        result = _only_material(comparison)

        assert result.status == MaterialStatus.NOT_RECYCLABLE
        assert result.recyclable is False
        assert result.reason == "Return to grocery store drop-off"

    def test_tie_favors_accepted(self, rules):
        comparison = compare_materials([{"name": "", "materials": ["plastic"]}], rules)
        assert _only_material(comparison).status == MaterialStatus.RECYCLABLE

    def test_rejection_without_location_rule_uses_default_reason(self, rules):
        comparison = compare_materials([{"name": "aa battery", "materials": ["battery"]}], rules)
        result = _only_material(comparison)

        assert result.status == MaterialStatus.NOT_RECYCLABLE
        assert result.reason == "Not accepted in curbside recycling"

    def test_unrecognized_material(self, rules):
        comparison = compare_materials([{"name": "widget", "materials": ["unobtainium"]}], rules)
        result = _only_material(comparison)

        assert result.status == MaterialStatus.UNKNOWN
        assert result.recyclable == "unknown"
        assert result.reason == "Material not recognized - check local guidelines"
        assert comparison.items[0].overall_status == OverallStatus.CHECK_LOCALLY

    def test_location_rules_extend_vocabulary(self, rules):
        item = {"name": "yogurt cup", "materials": ["yogurt cup"]}
        assert _only_material(compare_materials([item], rules)).status == MaterialStatus.UNKNOWN

        rules.accepted.append(
            MaterialEntry(material="Yogurt Cups", notes="Remove lids",
                          confidence=Confidence.MEDIUM, source_count=1)
        )
        result = _only_material(compare_materials([item], rules))
        assert result.status == MaterialStatus.RECYCLABLE
        assert result.notes == "Remove lids"


class TestItemStatus:

    def test_any_rejected_material_rejects_item(self, rules):
        comparison = compare_materials(
            [{"name": "lunch kit", "materials": ["aluminum", "styrofoam"]}], rules
        )
        item = comparison.items[0]

        assert [m.status for m in item.materials] == [
            MaterialStatus.RECYCLABLE, MaterialStatus.NOT_RECYCLABLE,
        ]
        assert item.overall_status == OverallStatus.NOT_RECYCLABLE

    def test_item_without_materials_defaults_to_recyclable(self, rules):
        comparison = compare_materials([{"name": "pizza box"}], rules)
        item = comparison.items[0]

        assert item.materials == []
        assert item.overall_status == OverallStatus.RECYCLABLE

    def test_null_materials_treated_as_empty(self, rules):
        item = DetectedItem.model_validate({"name": "mystery", "materials": None})
        assert item.materials == []
        assert compare_materials([item], rules).items[0].overall_status == OverallStatus.RECYCLABLE

    def test_item_fields_are_carried(self, rules):
        comparison = compare_materials(
            [{"name": "Soda Can", "materials": ["aluminum"], "confidence": "high", "preparation": "Rinse"}],
            rules,
        )
        item = comparison.items[0]
        assert (item.name, item.confidence, item.preparation) == ("Soda Can", "high", "Rinse")
        assert item.materials[0].material == "aluminum"


class TestComparisonSummary:

    def test_counts_by_overall_status(self, rules):
        items = [
            {"name": "plastic bottle", "materials": ["plastic"]},
            {"name": "aa battery", "materials": ["battery"]},
            {"name": "widget", "materials": ["unobtainium"]},
            {"name": "pizza box", "materials": []},
        ]
        summary = compare_materials(items, rules).summary

        assert summary.model_dump() == {"recyclable": 2, "not_recyclable": 1, "unknown": 1, "total": 4}

    @pytest.mark.parametrize("items", [[], None])
    def test_empty_input(self, rules, items):
        comparison = compare_materials(items, rules)

        assert comparison.items == []
        assert comparison.summary.model_dump() == {"recyclable": 0, "not_recyclable": 0, "unknown": 0, "total": 0}
        assert comparison.location == "Beverly Hills, CA"
        assert comparison.tips == ["Rinse containers before recycling"]

    def test_rules_without_location_default_to_unknown(self):
        comparison = compare_materials(
            [{"name": "plastic bottle", "materials": ["plastic"]}],
            {"accepted": [], "not_accepted": []},
        )

        assert comparison.location == "Unknown"
        assert comparison.items[0].overall_status == OverallStatus.RECYCLABLE

    def test_rules_accepted_as_plain_data(self, rules):
        comparison = compare_materials(
            [{"name": "plastic bottle", "materials": ["plastic"]}], rules.model_dump()
        )
        assert comparison.summary.recyclable == 1

    def test_deterministic(self, rules):
        items = [
            {"name": "plastic bottle", "materials": ["plastic", "paper"]},
            {"name": "glass jar", "materials": ["glass", "metal lid"]},
        ]
        first = compare_materials(items, rules).model_dump()
        second = compare_materials(items, rules).model_dump()
        assert first == second


class TestCanRecycle:

    @pytest.mark.parametrize(
        "items,expected",
        [
            ([{"name": "plastic bottle", "materials": ["plastic"]},
              {"name": "shipping box", "materials": ["cardboard"]}], True),
            ([{"name": "plastic bottle", "materials": ["plastic"]},
              {"name": "aa battery", "materials": ["battery"]}], False),
            ([{"name": "widget", "materials": ["unobtainium"]}], False),
            ([], False),
        ],
        ids=["all-recyclable", "one-rejected", "only-check-locally", "no-items"],
    )
    def test_batch_verdict(self, rules, items, expected):
        assert compare_materials(items, rules).can_recycle is expected

    def test_verdict_is_serialized(self, rules):
        payload = compare_materials([{"name": "plastic bottle", "materials": ["plastic"]}], rules).model_dump()

        assert payload["can_recycle"] is True


class TestVocabularyMatching:

    def test_most_specific_overlap_wins(self):
        match = best_vocabulary_match(["plastic bottle", "plastic"], ("plastic bags", "plastic bottles"))
        assert match.found
        assert (match.specificity, match.term) == (14, "plastic bottle")

    def test_no_overlap(self):
        assert not best_vocabulary_match(["widget"], ("glass", "paper")).found

    def test_vocabulary_is_lowercase_and_unique(self, rules):
        vocabulary = build_vocabulary({"Glass": ("glass",)}, rules.accepted)
        assert vocabulary == ("glass", "plastic bottles", "cardboard")
