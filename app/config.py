import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Runtime configuration, resolved once at startup.

    Secrets come from the environment or a local .env file and are never
    hardcoded.
    """

    jwt_secret: str
    database_url: str = "sqlite:///./loopmid.db"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    # Brevo transactional email
    brevo_api_key: Optional[str] = None
    brevo_sender_email: Optional[str] = None
    brevo_sender_name: str = "LoopMid Freelance"

    # Cloudinary avatar storage
    cloudinary_cloud_name: Optional[str] = None
    cloudinary_api_key: Optional[str] = None
    cloudinary_api_secret: Optional[str] = None

    log_level: str = "INFO"


def get_settings() -> Settings:
    load_dotenv()

    jwt_secret = os.getenv("JWT_SECRET")
    if not jwt_secret:
        raise ValueError("JWT_SECRET environment variable must be set")

    return Settings(
        jwt_secret=jwt_secret,
        database_url=os.getenv("DATABASE_URL", "sqlite:///./loopmid.db"),
        jwt_algorithm=os.getenv("ALGORITHM", "HS256"),
        brevo_api_key=os.getenv("BREVO_API_KEY"),
        brevo_sender_email=os.getenv("BREVO_SENDER_EMAIL"),
        cloudinary_cloud_name=os.getenv("CLOUDINARY_CLOUD_NAME"),
        cloudinary_api_key=os.getenv("CLOUDINARY_API_KEY"),
        cloudinary_api_secret=os.getenv("CLOUDINARY_API_SECRET"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
