import structlog
from fastapi import APIRouter, Request, Response, status
from sqlalchemy.exc import SQLAlchemyError

from school_api.schemas.health_schema import HealthCheck

logger = structlog.get_logger()

router = APIRouter()


@router.get("", response_model=HealthCheck)
async def health_check(request: Request, response: Response) -> HealthCheck:
    """
    Report whether the API can reach its database.

    Answers 503 with status "degraded" while the database is unreachable.
    """
    database = getattr(request.app.state, "database", None)
    if database is None:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthCheck(status="degraded", database_status="unhealthy")

    driver = database.engine.url.drivername
    try:
        await database.verify_connection()
    except (SQLAlchemyError, OSError) as e:
        logger.error("Health check could not reach database", driver=driver, error=str(e))
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthCheck(
            status="degraded", database_status="unhealthy", database_driver=driver
        )

    return HealthCheck(
        status="healthy", database_status="healthy", database_driver=driver
    )
