"""Supply Chain Analyst Agent - Serbest metin sorularını tedarik zinciri verisiyle yanıtlar.

- Veri snapshot'ını tek seferde okur
- Soruyu anahtar kelime kurallarıyla sınıflandırır ve ilgili analizörü çalıştırır
- Sonucu soru geçmişine (DynamoDB) ve S3 arşivine yazar
- Dashboard istatistiklerini ve listelerini sunar
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Optional

from src.agents.base_agent import BaseAgent
from src.analysis.composer import compose_response
from src.analysis.dashboard import compute_dashboard_stats
from src.analysis.intent_classifier import classify_intent
from src.models.supply_chain import (
    Alert,
    AnalysisResult,
    AnalystConfig,
    DashboardStats,
    InventoryStatus,
    ProductListing,
    QueryRecord,
    ShipmentDetails,
    Snapshot,
    Supplier,
)
from src.storage.query_log import DynamoDBQueryLog
from src.storage.snapshot_provider import DynamoDBSnapshotProvider

logger = logging.getLogger(__name__)


class SupplyChainAnalystAgent(BaseAgent):
    """Kural tabanlı tedarik zinciri soru analizörü."""

    def __init__(
        self,
        region_name: str = "us-west-2",
        config: Optional[AnalystConfig] = None,
        **kwargs: Any,
    ):
        super().__init__(
            agent_name="SupplyChainAnalystAgent",
            region_name=region_name,
            **kwargs,
        )
        self.config = config or AnalystConfig()
        self.snapshot_provider = DynamoDBSnapshotProvider(self.dynamodb)
        self.query_log = DynamoDBQueryLog(self.dynamodb)

    # --- Soru işleme ---

    def load_snapshot(self) -> Snapshot:
        """Soru analizi için snapshot: son sevkiyatlar ve çözülmemiş uyarılar sınırlı sayıda."""
        return self.snapshot_provider.fetch_snapshot(
            shipment_limit=self.config.shipment_limit,
            alert_limit=self.config.alert_limit,
        )

    def process(self, question: str, user_id: str) -> AnalysisResult:
        """Snapshot oku, analiz et, sonucu soru geçmişine yaz."""
        snapshot = self.load_snapshot()
        result = compose_response(question, snapshot)
        logger.info(
            "Soru yanıtlandı [%s]: intent=%s, %d insight",
            user_id, classify_intent(question).value, len(result.insights),
        )

        # Log yazımı okuma ile atomik değil; hata cevabı etkilemez
        record = self.query_log.save(user_id, question, result)
        if record is not None:
            self.log_to_s3(asdict(record), prefix="query-")
        return result

    # --- Dashboard ---

    def get_dashboard_stats(self) -> DashboardStats:
        return compute_dashboard_stats(self.snapshot_provider.fetch_snapshot())

    def get_suppliers(self) -> list[Supplier]:
        return self.snapshot_provider.fetch_suppliers()

    def get_products(self) -> list[ProductListing]:
        return self.snapshot_provider.get_products()

    def get_inventory_status(self) -> list[InventoryStatus]:
        return self.snapshot_provider.get_inventory_status()

    def get_shipments(self) -> list[ShipmentDetails]:
        return self.snapshot_provider.get_shipments(limit=self.config.shipment_limit)

    def get_alerts(self) -> list[Alert]:
        return self.snapshot_provider.fetch_alerts(limit=self.config.alert_limit)

    def get_query_history(self, user_id: str) -> list[QueryRecord]:
        return self.query_log.history(user_id, limit=self.config.history_limit)
