"""DynamoDB tablo oluşturma ve silme.

6 tablo: Suppliers, Products, Inventory, Shipments, Alerts, Queries
"""
import logging

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)

REGION = "us-west-2"
BOTO_CONFIG = Config(retries={"max_attempts": 3})


def _simple_table(table_name: str, key: str) -> dict:
    return {
        "TableName": table_name,
        "KeySchema": [
            {"AttributeName": key, "KeyType": "HASH"},
        ],
        "AttributeDefinitions": [
            {"AttributeName": key, "AttributeType": "S"},
        ],
        "BillingMode": "PAY_PER_REQUEST",
    }


TABLE_DEFINITIONS = [
    _simple_table("Suppliers", "supplier_id"),
    {
        "TableName": "Products",
        "KeySchema": [
            {"AttributeName": "product_id", "KeyType": "HASH"},
        ],
        "AttributeDefinitions": [
            {"AttributeName": "product_id", "AttributeType": "S"},
            {"AttributeName": "sku", "AttributeType": "S"},
        ],
        "GlobalSecondaryIndexes": [
            {
                "IndexName": "SkuIndex",
                "KeySchema": [
                    {"AttributeName": "sku", "KeyType": "HASH"},
                ],
                "Projection": {"ProjectionType": "ALL"},
            },
        ],
        "BillingMode": "PAY_PER_REQUEST",
    },
    _simple_table("Inventory", "inventory_id"),
    _simple_table("Shipments", "shipment_id"),
    _simple_table("Alerts", "alert_id"),
    {
        "TableName": "Queries",
        "KeySchema": [
            {"AttributeName": "query_id", "KeyType": "HASH"},
        ],
        "AttributeDefinitions": [
            {"AttributeName": "query_id", "AttributeType": "S"},
            {"AttributeName": "user_id", "AttributeType": "S"},
            {"AttributeName": "timestamp", "AttributeType": "S"},
        ],
        "GlobalSecondaryIndexes": [
            {
                "IndexName": "UserTimeIndex",
                "KeySchema": [
                    {"AttributeName": "user_id", "KeyType": "HASH"},
                    {"AttributeName": "timestamp", "KeyType": "RANGE"},
                ],
                "Projection": {"ProjectionType": "ALL"},
            },
        ],
        "BillingMode": "PAY_PER_REQUEST",
    },
]


def create_tables(region: str = REGION, client=None):
    """Tüm DynamoDB tablolarını oluşturur (mevcut olanları atlar)."""
    dynamodb = client or boto3.client("dynamodb", region_name=region, config=BOTO_CONFIG)

    created = []
    for table_def in TABLE_DEFINITIONS:
        table_name = table_def["TableName"]
        try:
            dynamodb.describe_table(TableName=table_name)
            logger.info("%s zaten mevcut, atlanıyor", table_name)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ResourceNotFoundException":
                logger.info("%s oluşturuluyor...", table_name)
                dynamodb.create_table(**table_def)
                # Tablonun aktif olmasını bekle
                waiter = dynamodb.get_waiter("table_exists")
                waiter.wait(TableName=table_name)
                created.append(table_name)
            else:
                raise
    return created


def delete_tables(region: str = REGION, client=None):
    """Tüm tabloları siler (dikkatli kullan)."""
    dynamodb = client or boto3.client("dynamodb", region_name=region, config=BOTO_CONFIG)
    for table_def in TABLE_DEFINITIONS:
        table_name = table_def["TableName"]
        try:
            dynamodb.delete_table(TableName=table_name)
            logger.info("%s silindi", table_name)
        except ClientError:
            logger.info("%s bulunamadı, atlanıyor", table_name)


if __name__ == "__main__":
    import sys

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")
    if len(sys.argv) > 1 and sys.argv[1] == "--delete":
        delete_tables()
    else:
        create_tables()
