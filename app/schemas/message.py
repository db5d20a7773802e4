# app/schemas/message.py
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from datetime import datetime, timezone

class MessageCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    email: EmailStr
    message: str = Field(..., min_length=1)
    createAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
