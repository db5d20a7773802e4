# app/api/endpoints/auth.py
import logging

from fastapi import APIRouter, Response

from app.core import security
from app.schemas import token as token_schema

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("/jwt")
def issue_token(user: token_schema.TokenRequest, response: Response):
    logger.info("Issuing token for %s", user.email)
    access_token = security.create_access_token(data={"email": user.email})
    security.set_token_cookie(response, access_token)
    return {"success": True}

@router.post("/logout")
def logout(response: Response):
    security.clear_token_cookie(response)
    return {"success": True}
