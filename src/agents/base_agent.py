"""Tüm agentlar için temel sınıf - DynamoDB/S3 erişimi ve S3 log arşivi."""

from __future__ import annotations

import json
import logging
import os
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger(__name__)

BUCKET_PREFIX = "supply-chain-dashboard"
LOG_BUCKET_ENV = "SUPPLY_CHAIN_LOG_BUCKET"


class BaseAgent(ABC):
    """AWS kaynaklarına bağlı agent temel sınıfı."""

    def __init__(
        self,
        agent_name: str,
        region_name: str = "us-west-2",
        dynamodb_resource: Optional[Any] = None,
        s3_client: Optional[Any] = None,
        log_bucket: Optional[str] = None,
    ):
        self.agent_name = agent_name
        self.region_name = region_name

        # AWS istemcileri - dependency injection destekli
        self.dynamodb = dynamodb_resource or boto3.resource(
            "dynamodb", region_name=region_name
        )
        self.s3 = s3_client or boto3.client("s3", region_name=region_name)

        self._s3_bucket_name = log_bucket or os.environ.get(LOG_BUCKET_ENV)

        logger.info("Agent başlatıldı: %s (region: %s)", agent_name, region_name)

    def _resolve_bucket(self) -> str:
        # Bucket adı verilmediyse account id'den türetilir
        if not self._s3_bucket_name:
            sts = boto3.client("sts", region_name=self.region_name)
            account_id = sts.get_caller_identity()["Account"]
            self._s3_bucket_name = f"{BUCKET_PREFIX}-{account_id}"
        return self._s3_bucket_name

    def log_to_s3(self, log_data: dict, prefix: str = "") -> Optional[str]:
        """Agent logunu S3'e kaydeder, yazılan key'i döndürür."""
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%S-%f")
        key = f"agent-logs/{self.agent_name.lower().replace(' ', '-')}/{prefix}{timestamp}.json"
        try:
            self.s3.put_object(
                Bucket=self._resolve_bucket(),
                Key=key,
                Body=json.dumps(log_data, default=str),
            )
        except (ClientError, BotoCoreError) as e:
            logger.warning("S3 log hatası: %s", e)
            return None
        return key

    @abstractmethod
    def process(self, *args: Any, **kwargs: Any) -> Any:
        """Her agent kendi iş mantığını implement eder."""
        ...
