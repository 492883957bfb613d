from src.storage.query_log import DynamoDBQueryLog
from src.storage.snapshot_provider import DynamoDBSnapshotProvider, SnapshotUnavailableError

__all__ = [
    "DynamoDBQueryLog",
    "DynamoDBSnapshotProvider",
    "SnapshotUnavailableError",
]
