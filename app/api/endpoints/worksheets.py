# app/api/endpoints/worksheets.py
import re
from typing import Optional

from fastapi import APIRouter, Depends
from pymongo import DESCENDING
from pymongo.database import Database

from app.core import security
from app.db import collections, session
from app.schemas import token as token_schema
from app.schemas import worksheet as worksheet_schema

router = APIRouter()

NEWEST_FIRST = [("createAt", DESCENDING)]

def build_worksheet_filter(employee_name: Optional[str], month: Optional[str]) -> dict:
    """
    Query for the progress page. `month` matches the leading "M/" of the
    M/D/YYYY date string, so month=3 never picks up 13/ or 3x/.
    """
    query = {}
    if employee_name:
        query["name"] = employee_name
    if month:
        query["date"] = {"$regex": f"^{re.escape(month)}/"}
    return query

@router.get("/work-sheet")
def read_own_worksheet(
    db: Database = Depends(session.get_db),
    employee: dict = Depends(security.get_current_employee),
):
    cursor = db[collections.WORK_SHEETS].find({"user_email": employee["email"]}).sort(NEWEST_FIRST)
    return session.serialize_docs(cursor)

@router.post("/work-sheet")
def create_worksheet_entry(
    entry: worksheet_schema.WorkSheetCreate,
    db: Database = Depends(session.get_db),
    identity: token_schema.TokenData = Depends(security.get_token_identity),
):
    doc = entry.model_dump()
    doc["user_email"] = identity.email
    return session.insert_result(db[collections.WORK_SHEETS].insert_one(doc))

@router.get("/work-sheets")
def search_worksheets(
    employeeName: Optional[str] = None,
    month: Optional[str] = None,
    db: Database = Depends(session.get_db),
    identity: Optional[token_schema.TokenData] = Depends(security.get_optional_identity),
):
    query = build_worksheet_filter(employeeName, month)
    return session.serialize_docs(db[collections.WORK_SHEETS].find(query).sort(NEWEST_FIRST))

@router.get("/progress-work")
def read_all_progress(
    db: Database = Depends(session.get_db),
    identity: token_schema.TokenData = Depends(security.get_token_identity),
):
    return session.serialize_docs(db[collections.WORK_SHEETS].find().sort(NEWEST_FIRST))
