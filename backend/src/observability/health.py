"""Component health checks used by GET /health."""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

import redis
from sqlalchemy import text
from sqlalchemy.orm import Session

from config import get_settings
from .logging_config import get_logger

logger = get_logger(__name__)


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DEGRADED = "degraded"


@dataclass
class ComponentHealth:
    status: HealthStatus
    message: Optional[str] = None
    latency_ms: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "message": self.message,
            "latency_ms": self.latency_ms,
        }


def check_database_health(db: Session) -> ComponentHealth:
    """Run ``SELECT 1`` against the configured database."""
    started = time.perf_counter()
    try:
        db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Database health check failed: {e}", exc_info=True)
        return ComponentHealth(status=HealthStatus.UNHEALTHY, message=f"Database error: {e}")

    return ComponentHealth(
        status=HealthStatus.HEALTHY,
        message="Database connection OK",
        latency_ms=round((time.perf_counter() - started) * 1000, 2)
    )


def check_redis_health() -> ComponentHealth:
    """Ping the Celery broker.

    Redis only carries background work (expired-result cleanup), so an
    unreachable broker degrades the service rather than taking it down.
    """
    started = time.perf_counter()
    try:
        client = redis.from_url(get_settings().REDIS_URL, socket_connect_timeout=1)
        client.ping()
    except Exception as e:
        logger.warning(f"Redis health check failed: {e}")
        return ComponentHealth(status=HealthStatus.DEGRADED, message=f"Redis error: {e}")

    return ComponentHealth(
        status=HealthStatus.HEALTHY,
        message="Redis connection OK",
        latency_ms=round((time.perf_counter() - started) * 1000, 2)
    )


def get_overall_health(components: Dict[str, ComponentHealth]) -> HealthStatus:
    statuses = [c.status for c in components.values()]
    if any(s == HealthStatus.UNHEALTHY for s in statuses):
        return HealthStatus.UNHEALTHY
    if all(s == HealthStatus.HEALTHY for s in statuses):
        return HealthStatus.HEALTHY
    return HealthStatus.DEGRADED
