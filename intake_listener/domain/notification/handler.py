"""Storage notification handler - logs pre-built file metadata documents."""
import json
import logging
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class StorageMetadata(BaseModel):
    """File metadata document uploaded to storage; fields are not validated."""

    business_number: Optional[str] = Field(None, alias="BusinessNumber")
    year: Optional[int] = Field(None, alias="Year")
    month: Optional[int] = Field(None, alias="Month")
    reference_task_id: Optional[str] = Field(None, alias="ReferenceTaskId")
    document_type: Optional[str] = Field(None, alias="DocumentType")
    extension: Optional[str] = Field(None, alias="Extension")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_log_record(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


def handle_storage_notification(name: str, content: Union[bytes, str]) -> Optional[StorageMetadata]:
    """
    Deserialize and log a metadata document from storage.

    Args:
        name: Object name, for logging
        content: Raw object content

    Returns:
        StorageMetadata, or None if the content could not be deserialized
    """
    logger.info(f"Storage notification processed object\n Name: {name} \n Size: {len(content)} Bytes")
    try:
        metadata = StorageMetadata.model_validate_json(content)
    except ValidationError as e:
        logger.error(f"Failed to deserialize object content for '{name}': {e}")
        return None

    logger.info("Deserialized Metadata:")
    logger.info(f"BusinessNumber: {metadata.business_number}")
    logger.info(f"Year: {metadata.year}")
    logger.info(f"Month: {metadata.month}")
    logger.info(f"ReferenceTaskId: {metadata.reference_task_id}")
    logger.info(f"DocumentType: {metadata.document_type}")
    logger.info(f"Extension: {metadata.extension}")

    logger.info("Message processed successfully. Success Response: ")
    logger.info(json.dumps(metadata.to_log_record(), separators=(',', ':'), ensure_ascii=False))
    return metadata
