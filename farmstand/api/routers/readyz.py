from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from farmstand.api.deps import get_database
from farmstand.db import Database
from farmstand.logging import get_logger
from farmstand.schemas.common import OkResponse

router = APIRouter(prefix="/readyz", tags=["health"])


@router.get(
    "",
    response_model=OkResponse,
    summary="Readiness probe",
    description="Round-trips SELECT 1 to the database (503 when unreachable).",
)
async def readyz(db: Database = Depends(get_database)):
    try:
        await db.ping()
    except (SQLAlchemyError, OSError):
        get_logger(__name__).warning("readyz_database_unavailable", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "error": {
                    "code": "database_unavailable",
                    "message": "Database is not reachable",
                }
            },
        )
    return {"ok": True}
