# app/api/endpoints/messages.py
from typing import Optional

from fastapi import APIRouter, Depends
from pymongo.database import Database

from app.core import security
from app.db import collections, session
from app.schemas import message as message_schema
from app.schemas import token as token_schema

router = APIRouter()

@router.get("/message")
def list_messages(
    db: Database = Depends(session.get_db),
    identity: Optional[token_schema.TokenData] = Depends(security.get_optional_identity),
):
    return session.serialize_docs(db[collections.MESSAGES].find())

@router.post("/message")
def send_message(message_in: message_schema.MessageCreate, db: Database = Depends(session.get_db)):
    """ Contact form submission from the public site. """
    return session.insert_result(db[collections.MESSAGES].insert_one(message_in.model_dump()))
