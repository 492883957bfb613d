"""Soru metnini sabit anahtar kelime kurallarıyla niyet kategorisine ayırır.

Kurallar öncelik sırasıyla denenir, ilk eşleşen kazanır. Son kural
(default) her metinle eşleşir, bu yüzden sınıflandırma asla başarısız olmaz.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.models.supply_chain import IntentCategory


@dataclass(frozen=True)
class IntentRule:
    category: IntentCategory
    keywords: tuple[str, ...] = ()

    def matches(self, lowered_question: str) -> bool:
        # Anahtar kelimesi olmayan kural her şeyle eşleşir
        if not self.keywords:
            return True
        return any(keyword in lowered_question for keyword in self.keywords)


INTENT_RULES: tuple[IntentRule, ...] = (
    IntentRule(IntentCategory.DELAY, ("delay", "delayed")),
    # "stock" kelimesi "stock level" ile çakışır; öncelik reorder'da
    IntentRule(IntentCategory.REORDER, ("reorder", "stock")),
    IntentRule(IntentCategory.RELIABILITY, ("reliability", "reliable")),
    IntentRule(IntentCategory.INVENTORY, ("inventory", "stock level")),
    IntentRule(IntentCategory.SHIPMENT, ("shipment", "delivery")),
    IntentRule(IntentCategory.DEFAULT),
)


def classify_intent(question: str) -> IntentCategory:
    lowered = question.lower()
    for rule in INTENT_RULES:
        if rule.matches(lowered):
            return rule.category
    return IntentCategory.DEFAULT
