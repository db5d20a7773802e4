# app/schemas/token.py
from pydantic import BaseModel, Field

class TokenRequest(BaseModel):
    email: str = Field(..., min_length=1)

class TokenData(BaseModel):
    email: str
