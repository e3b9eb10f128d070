from typing import Literal, Optional

from pydantic import BaseModel


class HealthCheck(BaseModel):
    """Liveness of the API and reachability of its database."""

    status: Literal["healthy", "degraded"]
    database_status: Literal["healthy", "unhealthy"]
    database_driver: Optional[str] = None
