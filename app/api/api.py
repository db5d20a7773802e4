# app/api/api.py
from fastapi import APIRouter
from app.api.endpoints import admin, auth, content, messages, payments, users, worksheets

api_router = APIRouter()

api_router.include_router(auth.router, tags=["Auth"])
api_router.include_router(users.router, tags=["Users"])
api_router.include_router(admin.router, tags=["Admin"])
api_router.include_router(worksheets.router, tags=["Work Sheets"])
api_router.include_router(payments.router, tags=["Payments"])
api_router.include_router(messages.router, tags=["Messages"])
api_router.include_router(content.router, tags=["Content"])
