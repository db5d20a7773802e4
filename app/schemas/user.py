# app/schemas/user.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional

class UserBase(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=1)
    name: Optional[str] = None
    designation: Optional[str] = None
    image_url: Optional[str] = None
    bank_account_no: Optional[str] = None
    salary: Optional[float] = Field(None, ge=0)

class UserCreate(UserBase):
    # Admin accounts are never self-registered.
    role: Literal["Employee", "HR"] = "Employee"
    isVerified: bool = False
    isFired: bool = False

class SalaryUpdate(BaseModel):
    salary: float = Field(..., gt=0)
