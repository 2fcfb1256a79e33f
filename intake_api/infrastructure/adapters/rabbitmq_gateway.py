"""RabbitMQ implementation of the submission queue gateway."""
import logging

import pika

from ...config.config import RabbitMQConfig
from ...domain.errors import QueueUnavailableError
from ..messaging.queue_gateway import SubmissionQueueGateway

logger = logging.getLogger(__name__)


class RabbitMQQueueGateway(SubmissionQueueGateway):
    """Publish file metadata messages to a durable RabbitMQ queue."""

    def __init__(self, config: RabbitMQConfig):
        self._config = config

    @property
    def queue(self) -> str:
        return self._config.queue

    def _parameters(self) -> pika.ConnectionParameters:
        credentials = pika.PlainCredentials(self._config.user, self._config.password)
        return pika.ConnectionParameters(
            host=self._config.host,
            port=self._config.port,
            virtual_host=self._config.vhost,
            credentials=credentials,
            heartbeat=self._config.heartbeat,
            blocked_connection_timeout=self._config.blocked_connection_timeout,
            socket_timeout=self._config.socket_timeout,
            connection_attempts=self._config.connection_attempts,
            retry_delay=0,
        )

    def enqueue(self, serialized_record: str) -> None:
        """
        Publish one message with publisher confirms and close the connection.

        There is no retry here; a failure is terminal for the request.

        Raises:
            QueueUnavailableError: If connecting or publishing fails
        """
        queue = self._config.queue
        connection = None
        try:
            logger.info(
                f"Publishing to RabbitMQ: host={self._config.host}, port={self._config.port}, "
                f"vhost={self._config.vhost}, queue={queue}"
            )
            connection = pika.BlockingConnection(self._parameters())
            channel = connection.channel()
            # Broker nacks and unroutable returns raise from basic_publish
            channel.confirm_delivery()
            channel.queue_declare(queue=queue, durable=True)
            channel.basic_publish(
                exchange='',
                routing_key=queue,
                body=serialized_record,
                mandatory=True,
                properties=pika.BasicProperties(
                    content_type='application/json',
                    delivery_mode=2  # Persistent message
                )
            )
            logger.info(f"Message sent to queue '{queue}': {serialized_record}")
        except Exception as e:
            logger.error(f"Error sending message to queue '{queue}': {e}")
            raise QueueUnavailableError(f"Queue publishing failed: {e}") from e
        finally:
            if connection is not None and connection.is_open:
                try:
                    connection.close()
                except Exception as close_error:
                    logger.warning(f"Failed to close RabbitMQ connection: {close_error}")
