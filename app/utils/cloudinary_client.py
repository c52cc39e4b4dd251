import io
import logging
import cloudinary
import cloudinary.uploader
from fastapi import Request
from app.config import Settings

logger = logging.getLogger(__name__)

AVATAR_FOLDER = "freelance_avatars"


def init_cloudinary(settings: Settings) -> None:
    cloudinary.config(
        cloud_name=settings.cloudinary_cloud_name,
        api_key=settings.cloudinary_api_key,
        api_secret=settings.cloudinary_api_secret,
        secure=True,
    )


class AvatarStorage:
    """Stores avatar images in Cloudinary and hands back their public URL."""

    def __init__(self, settings: Settings):
        init_cloudinary(settings)

    def upload(self, content: bytes, user_id: int) -> str:
        upload_result = cloudinary.uploader.upload(
            io.BytesIO(content),
            folder=AVATAR_FOLDER,
            public_id=f"user_{user_id}",
            overwrite=True,
            resource_type="image",
        )
        url = upload_result.get("secure_url")
        logger.info("Uploaded avatar for user %s", user_id)
        return url


def get_avatar_storage(request: Request) -> AvatarStorage:
    return request.app.state.avatar_storage
