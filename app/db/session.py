# app/db/session.py
import logging
from datetime import datetime

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import Request
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.results import InsertOneResult, UpdateResult
from pymongo.server_api import ServerApi

from app.core.config import settings
from app.core.errors import BadRequest
from app.db import collections

logger = logging.getLogger(__name__)


def create_client(uri: str) -> MongoClient:
    """Builds the process-wide client pinned to the Stable API v1."""
    return MongoClient(uri, server_api=ServerApi("1", strict=True, deprecation_errors=True))


def ensure_indexes(db: Database) -> None:
    # Account creation checks for the email first; the index settles concurrent inserts.
    db[collections.USERS].create_index([("email", ASCENDING)], unique=True)
    logger.info("Ensured unique index on %s.email", collections.USERS)


def connect(client: MongoClient) -> Database:
    client.admin.command("ping")
    logger.info("Pinged MongoDB deployment, connection is live")
    db = client[settings.DATABASE_NAME]
    ensure_indexes(db)
    return db


def get_db(request: Request) -> Database:
    return request.app.state.db


def object_id(value: str) -> ObjectId:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise BadRequest("invalid id")


def _serialize_value(value):
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _serialize_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize_value(v) for v in value]
    return value


def serialize_doc(doc: dict | None) -> dict | None:
    if doc is None:
        return None
    return _serialize_value(doc)


def serialize_docs(cursor) -> list[dict]:
    return [serialize_doc(d) for d in cursor]


def insert_result(result: InsertOneResult) -> dict:
    return {"acknowledged": result.acknowledged, "insertedId": str(result.inserted_id)}


def update_result(result: UpdateResult) -> dict:
    upserted = result.upserted_id
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedId": str(upserted) if upserted is not None else None,
    }
