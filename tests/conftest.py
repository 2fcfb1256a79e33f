"""Pytest configuration and shared fixtures."""
from typing import Any, Dict, List

import pytest

from intake_api.infrastructure.messaging.queue_gateway import SubmissionQueueGateway

BUSINESS_NUMBER = "123456789"
REFERENCE_TASK_ID = "ab12ef000000000000000000000000aa"
VALID_IDENTIFIER = f"{BUSINESS_NUMBER}202501.{REFERENCE_TASK_ID}.INV.pdf"


class RecordingGateway(SubmissionQueueGateway):
    """Gateway that keeps every enqueued payload in memory."""

    def __init__(self):
        self.sent: List[str] = []

    def enqueue(self, serialized_record: str) -> None:
        self.sent.append(serialized_record)


@pytest.fixture
def valid_identifier() -> str:
    """Provide an identifier that passes every producer check."""
    return VALID_IDENTIFIER


@pytest.fixture
def recording_gateway() -> RecordingGateway:
    return RecordingGateway()


@pytest.fixture
def sample_message() -> Dict[str, Any]:
    """Provide a queue message as the producer builds it."""
    return {
        "BusinessNumber": BUSINESS_NUMBER,
        "Year": 2025,
        "Month": 1,
        "ReferenceTaskId": REFERENCE_TASK_ID,
        "DocumentType": "INV",
        "Extension": "pdf",
    }
