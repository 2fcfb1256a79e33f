"""Application layer - S3 event notifications for uploaded metadata documents."""
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol, Union
from urllib.parse import unquote_plus

from ..domain.notification.handler import handle_storage_notification

logger = logging.getLogger(__name__)


class ObjectReader(Protocol):
    def read(self, bucket: str, key: str) -> bytes: ...


@dataclass(frozen=True)
class ObjectRef:
    bucket: str
    key: str


def extract_object_refs(event: Dict[str, Any]) -> List[ObjectRef]:
    """Extract bucket/key pairs from an S3 event notification."""
    refs = []
    for record in event.get("Records") or []:
        s3 = record.get("s3") if isinstance(record, dict) else None
        if not isinstance(s3, dict):
            continue
        bucket = (s3.get("bucket") or {}).get("name")
        key = (s3.get("object") or {}).get("key")
        if bucket and key:
            # S3 URL-encodes object keys in notifications
            refs.append(ObjectRef(bucket=bucket, key=unquote_plus(key)))
    return refs


def process_storage_event(body: Union[bytes, str], reader: ObjectReader) -> int:
    """
    Read and log every object referenced by a storage event.

    Returns:
        Number of objects whose metadata was deserialized and logged
    """
    try:
        event = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        logger.error(f"Failed to deserialize storage event: {e}")
        return 0
    if not isinstance(event, dict):
        logger.error("Storage event must be a JSON object")
        return 0

    handled = 0
    for ref in extract_object_refs(event):
        try:
            content = reader.read(ref.bucket, ref.key)
        except RuntimeError as e:
            logger.error(f"An error occurred while processing the object: {e}")
            continue
        if handle_storage_notification(ref.key, content) is not None:
            handled += 1
    return handled
