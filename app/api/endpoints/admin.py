# app/api/endpoints/admin.py
import logging

from fastapi import APIRouter, Depends
from pymongo.database import Database

from app.core import security
from app.db import collections, session
from app.schemas import user as user_schema

router = APIRouter()
logger = logging.getLogger(__name__)

# --- Admin ---

@router.get("/all-employee")
def list_verified_staff(
    db: Database = Depends(session.get_db),
    admin: dict = Depends(security.get_current_admin),
):
    """ Verified accounts that are not admins. """
    query = {"isVerified": True, "role": {"$ne": security.ADMIN}}
    return session.serialize_docs(db[collections.USERS].find(query))

@router.patch("/all-employee/{user_id}")
def promote_to_hr(
    user_id: str,
    db: Database = Depends(session.get_db),
    admin: dict = Depends(security.get_current_admin),
):
    result = db[collections.USERS].update_one(
        {"_id": session.object_id(user_id)}, {"$set": {"role": security.HR}}
    )
    logger.info("%s promoted account %s to HR", admin["email"], user_id)
    return session.update_result(result)

@router.patch("/all-employee-fired/{user_id}")
def fire_user(
    user_id: str,
    db: Database = Depends(session.get_db),
    admin: dict = Depends(security.get_current_admin),
):
    result = db[collections.USERS].update_one(
        {"_id": session.object_id(user_id)}, {"$set": {"isFired": True}}, upsert=True
    )
    logger.info("%s fired account %s", admin["email"], user_id)
    return session.update_result(result)

@router.patch("/increasing-salary/{email}")
def update_salary(
    email: str,
    salary_in: user_schema.SalaryUpdate,
    db: Database = Depends(session.get_db),
    admin: dict = Depends(security.get_current_admin),
):
    result = db[collections.USERS].update_one({"email": email}, {"$set": {"salary": salary_in.salary}})
    logger.info("%s set salary of %s to %s", admin["email"], email, salary_in.salary)
    return session.update_result(result)

# --- HR ---

@router.patch("/verify/{user_id}")
def verify_user(
    user_id: str,
    db: Database = Depends(session.get_db),
    hr: dict = Depends(security.get_current_hr),
):
    result = db[collections.USERS].update_one(
        {"_id": session.object_id(user_id)}, {"$set": {"isVerified": True}}
    )
    return session.update_result(result)
