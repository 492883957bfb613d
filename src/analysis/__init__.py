from src.analysis.composer import ANALYZERS, compose_response
from src.analysis.dashboard import compute_dashboard_stats
from src.analysis.intent_classifier import INTENT_RULES, IntentRule, classify_intent
from src.analysis.joins import build_snapshot

__all__ = [
    "ANALYZERS",
    "INTENT_RULES",
    "IntentRule",
    "build_snapshot",
    "classify_intent",
    "compose_response",
    "compute_dashboard_stats",
]
