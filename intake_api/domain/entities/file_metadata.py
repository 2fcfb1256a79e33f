"""FileMetadata entity - Domain model for a decoded file identifier."""
from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class FileMetadata:
    """FileMetadata entity - immutable domain model."""
    business_number: str
    year: int
    month: int
    reference_task_id: str
    document_type: str
    extension: str

    def to_message(self) -> Dict[str, Any]:
        """Convert to the flat queue message shape."""
        return {
            "BusinessNumber": self.business_number,
            "Year": self.year,
            "Month": self.month,
            "ReferenceTaskId": self.reference_task_id,
            "DocumentType": self.document_type,
            "Extension": self.extension,
        }
