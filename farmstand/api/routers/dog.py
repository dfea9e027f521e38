from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["diagnostics"])


@router.get("/dog", response_class=PlainTextResponse, summary="Diagnostic bark")
async def dog():
    return "WOOF"
