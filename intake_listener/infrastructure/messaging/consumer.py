"""RabbitMQ consumer for file intake queues."""
import time
import logging
from typing import Any, Callable
from threading import Event

import pika
from pika.exceptions import AMQPConnectionError, AMQPChannelError, StreamLostError

from ...core.config.rabbitmq import RabbitMQConfig

logger = logging.getLogger(__name__)

CONNECTION_ERRORS = (AMQPConnectionError, StreamLostError, ConnectionAbortedError, OSError)
CHANNEL_ERRORS = (AMQPChannelError, StreamLostError, ConnectionAbortedError, OSError)


class FileMetadataConsumer:
    """
    Blocking consumer handing raw message bodies to ``on_message``.

    A message is acked once ``on_message`` returns, whatever its outcome, so
    nothing is redelivered by this service. If ``on_message`` raises, the
    message is nacked without requeue.
    """

    def __init__(self, config: RabbitMQConfig, max_retries: int = 5, retry_delay: float = 5):
        self._config = config
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._connection = None
        self._channel = None
        self._stop_event: Event = Event()

    @property
    def queue(self) -> str:
        return self._config.queue

    def _connect(self):
        """Establish connection and channel with retry logic."""
        credentials = pika.PlainCredentials(self._config.user, self._config.password)
        parameters = pika.ConnectionParameters(
            host=self._config.host,
            port=self._config.port,
            virtual_host=self._config.vhost,
            credentials=credentials,
            heartbeat=600,
            blocked_connection_timeout=300,
            connection_attempts=3,
            retry_delay=2,
        )
        for attempt in range(1, self._max_retries + 1):
            try:
                logger.info(
                    "Connecting to RabbitMQ",
                    extra={"host": self._config.host, "queue": self._config.queue, "attempt": attempt},
                )
                self._connection = pika.BlockingConnection(parameters)
                self._channel = self._connection.channel()
                self._channel.queue_declare(queue=self._config.queue, durable=True, passive=False)
                logger.info("Connected to RabbitMQ", extra={"queue": self._config.queue})
                return
            except CONNECTION_ERRORS as e:
                logger.warning("RabbitMQ connection attempt failed: %s", e)
                if attempt < self._max_retries:
                    time.sleep(self._retry_delay)
                else:
                    raise

    def _reconnect(self):
        """Close existing connection and reconnect."""
        self._stop_consuming()
        self._close_connection()
        if not self._stop_event.is_set():
            self._connect()

    def _stop_consuming(self) -> None:
        try:
            if self._channel and self._channel.is_open:
                self._channel.stop_consuming()
        except Exception as e:
            logger.debug("Ignoring error while stopping channel: %s", e)

    def stop(self) -> None:
        """
        Signal the consumer to stop consuming. Safe to call from any thread.

        The request is scheduled on the connection's own I/O loop; ``start``
        then returns and closes the connection in the consuming thread.
        """
        self._stop_event.set()
        connection = self._connection
        try:
            if connection and connection.is_open:
                connection.add_callback_threadsafe(self._stop_consuming)
        except Exception as e:
            logger.debug("Ignoring error while scheduling stop: %s", e)

    def _close_connection(self) -> None:
        try:
            if self._connection and not self._connection.is_closed:
                self._connection.close()
        except Exception as e:
            logger.debug("Ignoring error while closing connection: %s", e)

    def build_callback(self, on_message: Callable[[bytes], Any]):
        """Build the pika callback wrapping ``on_message``."""
        def _callback(ch, method, properties, body):
            logger.info(
                "Message received from queue",
                extra={
                    "delivery_tag": method.delivery_tag,
                    "queue": self._config.queue,
                    "headers": getattr(properties, "headers", None),
                },
            )
            try:
                outcome = on_message(body)
            except CHANNEL_ERRORS:
                raise
            except Exception:
                logger.exception("Unhandled error while processing message")
                logger.warning(
                    "NACK-ing message due to unhandled exception",
                    extra={"delivery_tag": method.delivery_tag, "queue": self._config.queue},
                )
                ch.basic_nack(delivery_tag=method.delivery_tag, requeue=False)
                return
            logger.info(
                "Message handled",
                extra={
                    "delivery_tag": method.delivery_tag,
                    "queue": self._config.queue,
                    "outcome": getattr(outcome, "value", outcome),
                },
            )
            ch.basic_ack(delivery_tag=method.delivery_tag)
        return _callback

    def start(self, on_message: Callable[[bytes], Any]) -> None:
        """
        Start consuming messages with automatic reconnection on connection errors.

        Blocks until ``stop`` is called. The connection is closed here, in the
        thread that owns it.
        """
        self._connect()
        callback = self.build_callback(on_message)
        try:
            while not self._stop_event.is_set():
                try:
                    self._channel.basic_qos(prefetch_count=1)
                    self._channel.basic_consume(
                        queue=self._config.queue,
                        on_message_callback=callback,
                        auto_ack=False
                    )
                    logger.info("Starting RabbitMQ consumption loop", extra={"queue": self._config.queue})
                    self._channel.start_consuming()
                except CONNECTION_ERRORS:
                    if self._stop_event.is_set():
                        break
                    logger.warning("RabbitMQ connection lost; attempting to reconnect")
                    self._reconnect()
                    time.sleep(2)
                except KeyboardInterrupt:
                    self._stop_event.set()
                    break
                except Exception:
                    if self._stop_event.is_set():
                        break
                    logger.exception("Unexpected consumer error; reconnecting")
                    self._reconnect()
                    time.sleep(2)
        finally:
            self._close_connection()
            logger.info("RabbitMQ consumer stopped", extra={"queue": self._config.queue})
