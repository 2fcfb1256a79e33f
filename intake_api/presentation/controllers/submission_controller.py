"""Submission controller - turns a raw request body into a queued record."""
import json
import logging
from typing import Any, Dict, Iterable

from pydantic import ValidationError

from ...application.commands.submit_file_command import SubmitFileCommand
from ...application.use_cases.submission_use_cases import FILE_NAME_FIELD, submit_file
from ...domain.errors import MalformedBodyError, MissingFieldError
from ...infrastructure.messaging.queue_gateway import SubmissionQueueGateway
from ..dtos.errors import describe_validation_errors
from ..dtos.submission_models import SubmissionRequest, SubmissionResponse

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "File metadata processed and message sent to queue."


def parse_submission_body(raw_body: bytes) -> SubmitFileCommand:
    """
    Strictly deserialize the submission envelope.

    Raises:
        MalformedBodyError: If the body is not JSON, not an object, or FileName is not a string
        MissingFieldError: If FileName is absent or empty
    """
    try:
        payload = json.loads(raw_body or b"")
    except (ValueError, UnicodeDecodeError) as e:
        raise MalformedBodyError(f"Request body is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise MalformedBodyError("Request body must be a JSON object")

    try:
        request = SubmissionRequest.model_validate(payload)
    except ValidationError as e:
        details = "; ".join(f"{err['field']}: {err['error']}" for err in describe_validation_errors(e))
        raise MalformedBodyError(f"Invalid request body: {details}") from e

    if not request.file_name:
        raise MissingFieldError(FILE_NAME_FIELD)

    return SubmitFileCommand(file_name=request.file_name)


def handle_submit_file(
    command: SubmitFileCommand,
    gateway: SubmissionQueueGateway,
    allowed_extensions: Iterable[str]
) -> Dict[str, Any]:
    """
    Handle a file submission - blocking, run it off the event loop.

    Returns:
        Response dictionary with the queued record
    """
    metadata = submit_file(command, gateway, allowed_extensions)
    logger.info(f"Queued file metadata for '{command.file_name}'")
    response = SubmissionResponse(message=SUCCESS_MESSAGE, metadata=metadata.to_message())
    return response.model_dump(by_alias=True)
