"""Application layer - one pass of a dequeued file metadata message."""
import json
import logging
from enum import Enum
from typing import Union

from ..domain.message.errors import ConsumerValidationError, MessageDeserializationError
from ..domain.message.schema import deserialize_message
from ..domain.message.validator import validate_metadata

logger = logging.getLogger(__name__)


class MessageOutcome(str, Enum):
    """Terminal state of a processed message."""
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    DISCARDED = "DISCARDED"


def process_message(body: Union[bytes, str]) -> MessageOutcome:
    """
    Deserialize, re-validate and log a queue message.

    Every outcome is terminal and only logged; nothing is raised for bad
    messages. Redelivered duplicates are processed again and produce duplicate
    log lines.

    Args:
        body: Raw message payload

    Returns:
        MessageOutcome for the message
    """
    logger.info(f"Queue trigger processed message: {body!r}")

    try:
        metadata = deserialize_message(body)
    except MessageDeserializationError as e:
        logger.warning(f"Invalid message format received: {e}")
        return MessageOutcome.DISCARDED

    try:
        validate_metadata(metadata)
    except ConsumerValidationError as e:
        logger.warning(str(e))
        logger.warning("Validation failed for message metadata.")
        return MessageOutcome.REJECTED

    logger.info("Message processed successfully. Success Response: ")
    logger.info(json.dumps(metadata.to_log_record(), separators=(',', ':'), ensure_ascii=False))
    return MessageOutcome.ACCEPTED
