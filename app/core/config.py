# app/core/config.py
from typing import List, Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings; from dotenv import load_dotenv
load_dotenv()

class Settings(BaseSettings):
    PORT: int = 5000
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:5174"]

    DATABASE_URL: Optional[str] = None
    DB_USER: str = ""; DB_PASS: str = ""
    DB_CLUSTER_HOST: str = "cluster0.wezoknx.mongodb.net"
    DATABASE_NAME: str = "motionMaxDB"

    ACCESS_TOKEN_SECRET: str; JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    STRIPE_SECRET_KEY: str
    STRIPE_API_BASE: str = "https://api.stripe.com"

    # Require a token on the read routes the web client calls anonymously.
    PROTECT_OPEN_READS: bool = False

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def mongo_uri(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mongodb+srv://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASS)}@{self.DB_CLUSTER_HOST}/"
            "?retryWrites=true&w=majority&appName=Cluster0"
        )

settings = Settings()
