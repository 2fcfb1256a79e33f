#!/usr/bin/env python3
"""
File intake listener - consumes file metadata messages and storage notifications.
"""
import sys
import logging
import threading
from typing import Callable, Tuple

from dotenv import load_dotenv

# Configure logging before imports
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Reduce pika logging to WARNING to reduce noise
logging.getLogger('pika').setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

from .core.config.env import get_env  # noqa: E402
from .core.config.rabbitmq import load_rabbitmq_config  # noqa: E402
from .infrastructure.messaging.consumer import FileMetadataConsumer  # noqa: E402
from .application.message_processor import process_message  # noqa: E402
from .application.storage_processor import process_storage_event  # noqa: E402
from .infrastructure.storage.s3_reader import S3ObjectReader  # noqa: E402

STORAGE_JOIN_TIMEOUT = 10


def _start_storage_consumer(rabbitmq_config, on_failure: Callable[[], None]) -> Tuple[FileMetadataConsumer, threading.Thread]:
    """
    Consume S3 event notifications on a background thread.

    ``on_failure`` is called from that thread if the consumer ends with an error.
    """
    reader = S3ObjectReader(region=get_env("AWS_REGION"))
    consumer = FileMetadataConsumer(rabbitmq_config.for_queue(rabbitmq_config.storage_queue))

    def _on_event(body: bytes) -> int:
        return process_storage_event(body, reader)

    def _run() -> None:
        try:
            consumer.start(_on_event)
        except Exception:
            logger.exception("Storage notification consumer stopped unexpectedly")
            on_failure()

    thread = threading.Thread(target=_run, name="storage-consumer", daemon=True)
    thread.start()
    return consumer, thread


def main():
    logger.info("Starting file intake listener...")
    load_dotenv()
    storage_failed = threading.Event()
    storage = None
    try:
        logger.info("Loading RabbitMQ configuration...")
        rabbitmq_config = load_rabbitmq_config()
        logger.info(f"RabbitMQ config loaded: host={rabbitmq_config.host}, queue={rabbitmq_config.queue}, user={rabbitmq_config.user}")

        consumer = FileMetadataConsumer(rabbitmq_config)

        if rabbitmq_config.storage_queue:
            logger.info(f"Starting storage notification consumer on queue {rabbitmq_config.storage_queue}")

            def _on_storage_failure() -> None:
                storage_failed.set()
                consumer.stop()

            storage = _start_storage_consumer(rabbitmq_config, _on_storage_failure)

        logger.info("Starting consumer...")
        consumer.start(process_message)

    except KeyboardInterrupt:
        logger.info("Interrupted; shutting down")
    except Exception as exc:
        sys.stderr.write(f"{exc}\n")
        sys.exit(1)
    finally:
        if storage is not None:
            storage_consumer, thread = storage
            storage_consumer.stop()
            thread.join(timeout=STORAGE_JOIN_TIMEOUT)
            if thread.is_alive():
                logger.warning("Storage notification consumer did not stop in time")

    if storage_failed.is_set():
        sys.stderr.write("Storage notification consumer failed\n")
        sys.exit(1)


if __name__ == '__main__':
    main()
