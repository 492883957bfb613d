"""Soru -> niyet -> analizör yönlendirmesi."""

from __future__ import annotations

import logging
from typing import Callable

from src.analysis.analyzers import (
    analyze_delays,
    analyze_inventory,
    analyze_overview,
    analyze_reliability,
    analyze_reorders,
    analyze_shipments,
)
from src.analysis.intent_classifier import classify_intent
from src.models.supply_chain import AnalysisResult, IntentCategory, Snapshot

logger = logging.getLogger(__name__)

Analyzer = Callable[[Snapshot], AnalysisResult]

ANALYZERS: dict[IntentCategory, Analyzer] = {
    IntentCategory.DELAY: analyze_delays,
    IntentCategory.REORDER: analyze_reorders,
    IntentCategory.RELIABILITY: analyze_reliability,
    IntentCategory.INVENTORY: analyze_inventory,
    IntentCategory.SHIPMENT: analyze_shipments,
    IntentCategory.DEFAULT: analyze_overview,
}


def compose_response(question: str, snapshot: Snapshot) -> AnalysisResult:
    """Soruyu sınıflandırır ve ilgili analizörün sonucunu değiştirmeden döndürür."""
    intent = classify_intent(question)
    logger.debug("Soru sınıflandırıldı: %s", intent.value)
    return ANALYZERS[intent](snapshot)
