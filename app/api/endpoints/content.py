# app/api/endpoints/content.py
# Read-only marketing collections; they are seeded outside this service.
from fastapi import APIRouter, Depends
from pymongo.database import Database

from app.db import collections, session

router = APIRouter()

def _collection_reader(name: str):
    def read_collection(db: Database = Depends(session.get_db)):
        return session.serialize_docs(db[name].find())
    read_collection.__name__ = f"read_{name}"
    return read_collection

for _name in collections.STATIC_CONTENT:
    router.add_api_route(f"/{_name}", _collection_reader(_name), methods=["GET"])
