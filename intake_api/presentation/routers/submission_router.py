"""Submission router - Endpoint for file identifier submissions."""
import logging
from typing import Dict, Any

from fastapi import APIRouter, Depends, HTTPException, Request
from starlette.concurrency import run_in_threadpool

from ...config.config import IntakeConfig
from ...domain.errors import InfrastructureError, IntakeError
from ...infrastructure.messaging.queue_gateway import SubmissionQueueGateway
from ..controllers.submission_controller import handle_submit_file, parse_submission_body
from ..dependencies import get_intake_config, get_queue_gateway

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/files", tags=["Files"])


@router.post("/validate", status_code=200)
async def validate_file(
    request: Request,
    gateway: SubmissionQueueGateway = Depends(get_queue_gateway),
    config: IntakeConfig = Depends(get_intake_config),
) -> Dict[str, Any]:
    """
    Decode a file identifier and send its metadata to the queue.

    Body: ``{"FileName": "<identifier>"}``. Responds 200 only after the queue
    confirmed the send.
    """
    raw_body = await request.body()
    try:
        command = parse_submission_body(raw_body)
        return await run_in_threadpool(
            handle_submit_file, command, gateway, config.allowed_extensions
        )
    except InfrastructureError as e:
        logger.error(f"Queue error in validate_file: {e}")
        raise HTTPException(status_code=e.status_code, detail="Failed to send file metadata to queue")
    except IntakeError as e:
        logger.warning(f"Validation error in validate_file: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.message)
