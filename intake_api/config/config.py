"""Configuration module for intake-api."""
import os
from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_FILE_QUEUE = "filequeue"
DEFAULT_ALLOWED_EXTENSIONS = ("pdf",)


@dataclass(frozen=True)
class RabbitMQConfig:
    """RabbitMQ connection settings for the submission gateway."""
    host: str
    user: str
    password: str
    queue: str = DEFAULT_FILE_QUEUE
    port: int = 5672
    vhost: str = "/"
    heartbeat: int = 30
    blocked_connection_timeout: float = 30.0
    socket_timeout: float = 10.0
    connection_attempts: int = 1


@dataclass(frozen=True)
class IntakeConfig:
    """Identifier intake rules."""
    allowed_extensions: Tuple[str, ...] = DEFAULT_ALLOWED_EXTENSIONS


def _get_required_env(name: str) -> str:
    """Get required environment variable or raise error."""
    value = os.getenv(name)
    if value is None or value == "":
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value


def get_rabbitmq_config() -> RabbitMQConfig:
    """Get RabbitMQ configuration from environment variables."""
    return RabbitMQConfig(
        host=_get_required_env("RABBITMQ_HOST"),
        user=_get_required_env("RABBITMQ_USER"),
        password=_get_required_env("RABBITMQ_PASSWORD"),
        queue=_get_env("RABBITMQ_FILE_QUEUE", DEFAULT_FILE_QUEUE),
        port=int(_get_env("RABBITMQ_PORT", "5672")),
        vhost=_get_env("RABBITMQ_VHOST", "/"),
        heartbeat=int(_get_env("RABBITMQ_HEARTBEAT", "30")),
        blocked_connection_timeout=float(_get_env("RABBITMQ_BLOCKED_TIMEOUT", "30")),
        socket_timeout=float(_get_env("RABBITMQ_SOCKET_TIMEOUT", "10")),
        connection_attempts=int(_get_env("RABBITMQ_CONN_ATTEMPTS", "1")),
    )


def parse_extensions(raw: Optional[str]) -> Tuple[str, ...]:
    """Parse a comma separated extension list, e.g. ``"pdf, docx"``."""
    if not raw:
        return DEFAULT_ALLOWED_EXTENSIONS
    extensions = tuple(part.strip() for part in raw.split(",") if part.strip())
    return extensions or DEFAULT_ALLOWED_EXTENSIONS


def get_intake_config() -> IntakeConfig:
    """Get identifier intake rules from environment variables."""
    return IntakeConfig(
        allowed_extensions=parse_extensions(_get_env("INTAKE_ALLOWED_EXTENSIONS"))
    )
