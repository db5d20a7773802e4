# app/schemas/payment.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class PaymentCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=1)
    month: str
    amount: float = Field(..., ge=0)
    year: Optional[int] = None
    name: Optional[str] = None
    status: str = "paid"
    transactionId: Optional[str] = None

class PaymentIntentRequest(BaseModel):
    salary: float = Field(..., gt=0)

class PaymentIntentResponse(BaseModel):
    clientSecret: str
