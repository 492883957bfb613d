"""Niyet sınıflandırıcı unit testleri."""

import pytest

from src.analysis.intent_classifier import INTENT_RULES, classify_intent
from src.models.supply_chain import IntentCategory


class TestKeywordMatching:

    @pytest.mark.parametrize(
        "question, expected",
        [
            ("Which supplier is causing delays?", IntentCategory.DELAY),
            ("Show delayed orders", IntentCategory.DELAY),
            ("What should I reorder this week?", IntentCategory.REORDER),
            ("Are we low on stock?", IntentCategory.REORDER),
            ("Which suppliers have the lowest reliability?", IntentCategory.RELIABILITY),
            ("Who is the most reliable vendor?", IntentCategory.RELIABILITY),
            ("Summarize the inventory", IntentCategory.INVENTORY),
            ("When is the next shipment?", IntentCategory.SHIPMENT),
            ("Any delivery due soon?", IntentCategory.SHIPMENT),
            ("Hello there", IntentCategory.DEFAULT),
        ],
    )
    def test_categories(self, question, expected):
        assert classify_intent(question) == expected

    def test_case_insensitive(self):
        assert classify_intent("DELAYED SHIPMENTS") == IntentCategory.DELAY
        assert classify_intent("InVeNtOrY") == IntentCategory.INVENTORY

    def test_empty_question_is_default(self):
        assert classify_intent("") == IntentCategory.DEFAULT

    def test_deterministic(self):
        question = "Which suppliers are reliable?"
        assert classify_intent(question) == classify_intent(question)


class TestPriority:
    """İlk eşleşen kural kazanır."""

    def test_delay_beats_reorder(self):
        assert classify_intent("Will the delay affect my reorder?") == IntentCategory.DELAY

    def test_stock_level_goes_to_reorder(self):
        # "stock level" hem reorder hem inventory ile eşleşir
        assert classify_intent("What is the stock level?") == IntentCategory.REORDER

    def test_reliability_beats_shipment(self):
        assert classify_intent("How reliable is delivery?") == IntentCategory.RELIABILITY

    def test_inventory_beats_shipment(self):
        assert classify_intent("inventory after the shipment") == IntentCategory.INVENTORY

    def test_rule_order(self):
        assert [r.category for r in INTENT_RULES] == [
            IntentCategory.DELAY,
            IntentCategory.REORDER,
            IntentCategory.RELIABILITY,
            IntentCategory.INVENTORY,
            IntentCategory.SHIPMENT,
            IntentCategory.DEFAULT,
        ]

    def test_default_rule_matches_everything(self):
        assert INTENT_RULES[-1].matches("anything at all")
        assert INTENT_RULES[-1].matches("")
