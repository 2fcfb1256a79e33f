"""FastAPI dependencies - configuration and gateway wiring."""
from functools import lru_cache

from ..config.config import IntakeConfig, get_intake_config as load_intake_config, get_rabbitmq_config
from ..infrastructure.adapters.rabbitmq_gateway import RabbitMQQueueGateway
from ..infrastructure.messaging.queue_gateway import SubmissionQueueGateway


@lru_cache(maxsize=1)
def get_intake_config() -> IntakeConfig:
    return load_intake_config()


@lru_cache(maxsize=1)
def get_queue_gateway() -> SubmissionQueueGateway:
    """Build the RabbitMQ gateway once, from environment configuration."""
    return RabbitMQQueueGateway(get_rabbitmq_config())
