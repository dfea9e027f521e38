# farmstand/schemas/common.py
from pydantic import BaseModel, Field


class OkResponse(BaseModel):
    ok: bool = Field(description="Always true on success")

    model_config = {"json_schema_extra": {"examples": [{"ok": True}]}}
