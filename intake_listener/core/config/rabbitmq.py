"""RabbitMQ configuration helpers."""
from dataclasses import dataclass
from typing import Optional

from .env import get_required_env, get_env


@dataclass(frozen=True)
class RabbitMQConfig:
    """RabbitMQ configuration."""
    host: str
    user: str
    password: str
    queue: str
    port: int = 5672
    vhost: str = "/"
    storage_queue: Optional[str] = None

    def for_queue(self, queue: str) -> "RabbitMQConfig":
        """Same broker settings, different queue."""
        return RabbitMQConfig(
            host=self.host,
            user=self.user,
            password=self.password,
            queue=queue,
            port=self.port,
            vhost=self.vhost,
            storage_queue=None,
        )


def load_rabbitmq_config() -> RabbitMQConfig:
    """
    Load RabbitMQ configuration from environment variables.

    Returns:
        RabbitMQConfig instance

    Raises:
        RuntimeError: If required environment variables are missing
    """
    return RabbitMQConfig(
        host=get_required_env('RABBITMQ_HOST'),
        user=get_required_env('RABBITMQ_USER'),
        password=get_required_env('RABBITMQ_PASSWORD'),
        queue=get_env('RABBITMQ_FILE_QUEUE', 'filequeue'),
        port=int(get_env('RABBITMQ_PORT', '5672')),
        vhost=get_env('RABBITMQ_VHOST', '/'),
        storage_queue=get_env('RABBITMQ_STORAGE_QUEUE') or None,
    )
