# farmstand/api/routers/healthz.py
from fastapi import APIRouter

from farmstand.schemas.common import OkResponse

router = APIRouter(prefix="/healthz", tags=["health"])


@router.get(
    "",
    response_model=OkResponse,
    summary="Liveness probe",
    description="Returns 200 without touching the database.",
)
async def healthz():
    return {"ok": True}
