"""Pydantic models for file submission request/response validation."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class SubmissionRequest(BaseModel):
    """Submission envelope carrying the raw file identifier."""

    file_name: Optional[StrictStr] = Field(None, alias="FileName", description="Raw file identifier")

    model_config = ConfigDict(
        # Unknown envelope fields are ignored, not forwarded
        extra="ignore",
        populate_by_name=True,
    )


class QueuedMetadataModel(BaseModel):
    """Queued record, echoed back to the caller."""

    business_number: StrictStr = Field(..., alias="BusinessNumber")
    year: StrictInt = Field(..., alias="Year")
    month: StrictInt = Field(..., alias="Month")
    reference_task_id: StrictStr = Field(..., alias="ReferenceTaskId")
    document_type: StrictStr = Field(..., alias="DocumentType")
    extension: StrictStr = Field(..., alias="Extension")

    model_config = ConfigDict(populate_by_name=True)


class SubmissionResponse(BaseModel):
    """Successful submission response."""

    message: str = Field(..., description="Confirmation text")
    metadata: QueuedMetadataModel = Field(..., description="Record sent to the queue")
