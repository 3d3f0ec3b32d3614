# tests/unit/domain/formatting/test_grouping.py
import pytest

from domain.models.context_package import ConversationHistory, KnowledgeItem, Outcome
from domain.formatting.grouping import group_by, cap_list, filter_and_cap_history, RELEVANT_OUTCOMES

def _entry(label: str, outcome: str) -> ConversationHistory:
    return ConversationHistory(timestamp="2026-10-19T12:00:00Z", user_input=label, outcome=outcome)

class TestGroupBy:
    """Test stable grouping"""

    def test_group_stability(self):
        """Missing keys go to "general"; first-seen key order and item order are kept"""
        items = [
            KnowledgeItem(title="a", description="", type="solution"),
            KnowledgeItem(title="b", description="", type=None),
            KnowledgeItem(title="c", description="", type="solution"),
        ]

        groups = group_by(items, lambda item: item.type)

        assert list(groups.keys()) == ["solution", "general"]
        assert groups["solution"] == [items[0], items[2]]
        assert groups["general"] == [items[1]]

    def test_empty_string_key_defaults_to_general(self):
        groups = group_by(["x"], lambda item: "")

        assert groups == {"general": ["x"]}

    def test_empty_input(self):
        assert group_by([], lambda item: item) == {}

class TestCapList:
    """Test list capping"""

    @pytest.mark.parametrize("size,cap", [(0, 3), (2, 3), (3, 3), (7, 3), (5, 0)])
    def test_cap_invariant(self, size, cap):
        """Never more than min(cap, len) entries, in original order"""
        items = list(range(size))
        capped = cap_list(items, cap)

        assert len(capped) == min(cap, size)
        assert capped == items[:cap]

    def test_does_not_sort(self):
        assert cap_list([3, 1, 2], 2) == [3, 1]

    def test_negative_cap_yields_nothing(self):
        assert cap_list([1, 2], -1) == []

class TestFilterAndCapHistory:
    """Test history relevance filtering"""

    def test_keeps_success_and_partial_success_in_order(self):
        history = [
            _entry("fail", Outcome.FAILURE.value),
            _entry("partial", Outcome.PARTIAL_SUCCESS.value),
            _entry("unknown", Outcome.UNKNOWN.value),
            _entry("ok", Outcome.SUCCESS.value),
        ]

        relevant = filter_and_cap_history(history, RELEVANT_OUTCOMES, 5)

        assert [entry.user_input for entry in relevant] == ["partial", "ok"]

    def test_caps_after_filtering(self):
        history = [_entry(str(i), "success") for i in range(5)]

        relevant = filter_and_cap_history(history, RELEVANT_OUTCOMES, 2)

        assert [entry.user_input for entry in relevant] == ["0", "1"]

    def test_nothing_survives(self):
        history = [_entry("fail", "failure")]

        assert filter_and_cap_history(history, RELEVANT_OUTCOMES, 2) == []

    def test_accepts_enum_outcomes(self):
        history = [_entry("fail", "failure"), _entry("ok", "success")]

        relevant = filter_and_cap_history(history, [Outcome.FAILURE], 2)

        assert [entry.user_input for entry in relevant] == ["fail"]
