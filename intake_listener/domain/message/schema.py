"""Queue message schema for file metadata."""
import json
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import MessageDeserializationError


class FileMetadataMessage(BaseModel):
    """
    File metadata as read from the queue.

    Producers may omit ``Extension``; every other field is required and must
    have its JSON type. Unknown keys are ignored.
    """

    business_number: str = Field(..., alias="BusinessNumber")
    year: int = Field(..., alias="Year")
    month: int = Field(..., alias="Month")
    reference_task_id: str = Field(..., alias="ReferenceTaskId")
    document_type: str = Field(..., alias="DocumentType")
    extension: Optional[str] = Field(None, alias="Extension")

    model_config = ConfigDict(strict=True, extra="ignore", populate_by_name=True, frozen=True)

    def to_log_record(self) -> Dict[str, Any]:
        record = {
            "BusinessNumber": self.business_number,
            "Year": self.year,
            "Month": self.month,
            "ReferenceTaskId": self.reference_task_id,
            "DocumentType": self.document_type,
        }
        if self.extension is not None:
            record["Extension"] = self.extension
        return record


def deserialize_message(body: Union[bytes, str]) -> FileMetadataMessage:
    """
    Deserialize a queue payload into FileMetadataMessage.

    Raises:
        MessageDeserializationError: On invalid JSON, an empty record or a field of the wrong shape
    """
    try:
        payload = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise MessageDeserializationError(f"Payload is not valid JSON: {e}") from e

    if not payload:
        raise MessageDeserializationError("Payload is an empty record")
    if not isinstance(payload, dict):
        raise MessageDeserializationError(f"Payload must be a JSON object, got {type(payload).__name__}")

    try:
        return FileMetadataMessage.model_validate(payload)
    except ValidationError as e:
        fields = ", ".join(".".join(str(loc) for loc in err["loc"]) for err in e.errors())
        raise MessageDeserializationError(f"Invalid message fields: {fields}") from e
