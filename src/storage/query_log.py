"""Soru-cevap geçmişinin DynamoDB'de saklanması."""

from __future__ import annotations

import logging
import uuid
from typing import Any, Optional

from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from src.models.supply_chain import AnalysisResult, QueryRecord
from src.storage.records import query_from_item, record_to_item

logger = logging.getLogger(__name__)

QUERIES_TABLE = "Queries"
USER_TIME_INDEX = "UserTimeIndex"


class DynamoDBQueryLog:
    """İşlenen her soru için bir QueryRecord yazar; kayıtlar güncellenmez, silinmez."""

    def __init__(self, dynamodb_resource: Any):
        self.table = dynamodb_resource.Table(QUERIES_TABLE)

    def save(self, user_id: str, question: str, result: AnalysisResult) -> Optional[QueryRecord]:
        """Kaydı yazar. Yazma hatası loglanır ve None döner; hesaplanan cevap geçerli kalır."""
        record = QueryRecord(
            query_id=str(uuid.uuid4()),
            user_id=user_id,
            question=question,
            response=result.response,
            insights=list(result.insights),
            recommendations=list(result.recommendations),
        )
        try:
            self.table.put_item(Item=record_to_item(record))
        except ClientError as e:
            logger.warning("Soru kaydı yazılamadı: %s", e)
            return None
        return record

    def history(self, user_id: str, limit: int = 10) -> list[QueryRecord]:
        """Kullanıcının son soruları, en yeni önce."""
        try:
            resp = self.table.query(
                IndexName=USER_TIME_INDEX,
                KeyConditionExpression=Key("user_id").eq(user_id),
                ScanIndexForward=False,
                Limit=limit,
            )
        except ClientError as e:
            logger.error("Soru geçmişi sorgulama hatası: %s", e)
            return []
        return [query_from_item(item) for item in resp.get("Items", [])]
