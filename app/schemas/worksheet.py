# app/schemas/worksheet.py
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime, timezone
from typing import Optional

class WorkSheetCreate(BaseModel):
    """
    A logged unit of work. `date` keeps the client's M/D/YYYY format so the
    month filter can match on its prefix.
    """
    model_config = ConfigDict(extra="allow")

    task: str
    hours: float = Field(..., ge=0, le=24)
    date: str
    name: Optional[str] = None
    createAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
