# app/api/endpoints/users.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from app.core import security
from app.db import collections, session
from app.schemas import token as token_schema
from app.schemas import user as user_schema

router = APIRouter()
logger = logging.getLogger(__name__)

USER_EXISTS = {"message": "user already exists", "insertedId": None}

@router.post("/users")
def create_user(user_in: user_schema.UserCreate, db: Database = Depends(session.get_db)):
    """
    Stores the account on first sign-in. A repeat submission for the same
    email leaves the stored document alone.
    """
    users = db[collections.USERS]
    if users.find_one({"email": user_in.email}):
        return USER_EXISTS
    try:
        result = users.insert_one(user_in.model_dump())
    except DuplicateKeyError:
        return USER_EXISTS
    logger.info("Created %s account for %s", user_in.role, user_in.email)
    return session.insert_result(result)

@router.get("/users")
def list_employees(db: Database = Depends(session.get_db)):
    return session.serialize_docs(db[collections.USERS].find({"role": security.EMPLOYEE}))

def _has_role(db: Database, email: str, role: str) -> bool:
    return security.is_authorized(db[collections.USERS].find_one({"email": email}), [role])

@router.get("/users/employee/{email}")
def check_employee(
    email: str,
    db: Database = Depends(session.get_db),
    identity: token_schema.TokenData = Depends(security.get_token_identity),
):
    security.ensure_same_user(email, identity)
    return {"employee": _has_role(db, email, security.EMPLOYEE)}

@router.get("/users/HR/{email}")
def check_hr(
    email: str,
    db: Database = Depends(session.get_db),
    identity: token_schema.TokenData = Depends(security.get_token_identity),
):
    security.ensure_same_user(email, identity)
    return {"HR": _has_role(db, email, security.HR)}

@router.get("/users/admin/{email}")
def check_admin(
    email: str,
    db: Database = Depends(session.get_db),
    identity: token_schema.TokenData = Depends(security.get_token_identity),
):
    security.ensure_same_user(email, identity)
    return {"admin": _has_role(db, email, security.ADMIN)}

@router.get("/details/{email}")
def read_user_details(
    email: str,
    db: Database = Depends(session.get_db),
    staff: dict = Depends(security.get_current_staff),
):
    """Single account for the employee details page, or null."""
    return session.serialize_doc(db[collections.USERS].find_one({"email": email}))

@router.get("/fired-users")
def list_fired_users(
    email: Optional[str] = None,
    db: Database = Depends(session.get_db),
    identity: Optional[token_schema.TokenData] = Depends(security.get_optional_identity),
):
    query = {"isFired": True}
    if email:
        query["email"] = email
    return session.serialize_docs(db[collections.USERS].find(query))
