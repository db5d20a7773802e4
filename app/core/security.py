# app/core/security.py
# Handles JWT cookies, identity checks, and all role-checking dependencies.
from typing import Iterable, Optional

from fastapi import Depends, Request, Response
from jose import JWTError, jwt
from pymongo.database import Database
from datetime import datetime, timedelta, timezone

from app.db import collections, session
from app.core.config import settings
from app.core.errors import Forbidden, Unauthorized
from app.schemas import token as token_schema

TOKEN_COOKIE = "token"

# --- Roles ---
EMPLOYEE, HR, ADMIN = "Employee", "HR", "Admin"

# --- JWT Creation ---
def create_access_token(data: dict) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.ACCESS_TOKEN_SECRET, algorithm=settings.JWT_ALGORITHM)

def decode_access_token(token: str) -> token_schema.TokenData:
    try:
        payload = jwt.decode(token, settings.ACCESS_TOKEN_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        raise Unauthorized()
    email: Optional[str] = payload.get("email")
    if not email:
        raise Unauthorized()
    return token_schema.TokenData(email=email)

# --- Cookies ---
def cookie_options() -> dict:
    return {
        "httponly": True,
        "secure": settings.is_production,
        "samesite": "none" if settings.is_production else "strict",
    }

def set_token_cookie(response: Response, token: str) -> None:
    response.set_cookie(TOKEN_COOKIE, token, **cookie_options())

def clear_token_cookie(response: Response) -> None:
    response.delete_cookie(TOKEN_COOKIE, **cookie_options())

# --- Credential Verifier ---
def get_token_identity(request: Request) -> token_schema.TokenData:
    token = request.cookies.get(TOKEN_COOKIE)
    if not token:
        raise Unauthorized()
    return decode_access_token(token)

def get_optional_identity(request: Request) -> Optional[token_schema.TokenData]:
    """Token check for the reads that are only gated when PROTECT_OPEN_READS is on."""
    if not settings.PROTECT_OPEN_READS:
        return None
    return get_token_identity(request)

def ensure_same_user(email: str, identity: token_schema.TokenData) -> None:
    if email != identity.email:
        raise Forbidden()

# --- Role Authorizer ---
def is_authorized(account: Optional[dict], allowed_roles: Iterable[str]) -> bool:
    """True when the account exists and its role is one of allowed_roles (exact match)."""
    if account is None:
        return False
    return account.get("role") in tuple(allowed_roles)

def require_role(*allowed_roles: str):
    def dependency(
        identity: token_schema.TokenData = Depends(get_token_identity),
        db: Database = Depends(session.get_db),
    ) -> dict:
        account = db[collections.USERS].find_one({"email": identity.email})
        if not is_authorized(account, allowed_roles):
            raise Forbidden()
        return account
    return dependency

get_current_employee = require_role(EMPLOYEE)
get_current_hr = require_role(HR)
get_current_admin = require_role(ADMIN)
get_current_staff = require_role(HR, ADMIN)
