# app/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.api import api_router
from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.logging import setup_logging
from app.db import session
from app.services.payments import PaymentGateway

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Process-wide clients ---
    client = session.create_client(settings.mongo_uri)
    app.state.db = session.connect(client)
    app.state.gateway = PaymentGateway(settings.STRIPE_SECRET_KEY, base_url=settings.STRIPE_API_BASE)
    try:
        yield
    finally:
        await app.state.gateway.aclose()
        client.close()
        logger.info("Closed database and payment gateway clients")


app = FastAPI(title="MotionMax API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)

# --- Routes ---
app.include_router(api_router)

@app.get("/")
def read_root():
    return {"message": "MotionMax API is running"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
