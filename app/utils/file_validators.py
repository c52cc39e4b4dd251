import os
from typing import Optional
from fastapi import UploadFile
from PIL import Image
import io
from app.utils.exceptions import ValidationError

ALLOWED_IMAGE_EXTENSIONS = [".jpg", ".jpeg", ".png"]
MAX_IMAGE_SIZE = 2 * 1024 * 1024


def _get_file_extension(filename: Optional[str]) -> str:
    """Safely extract file extension"""
    if not filename:
        raise ValidationError("No filename provided")

    ext = os.path.splitext(filename)[1].lower()

    if not ext:
        raise ValidationError("File has no extension")

    return ext


async def validate_image_file(file: UploadFile) -> bytes:
    """Validate avatar uploads and return their bytes"""

    file_ext = _get_file_extension(file.filename)

    if file_ext not in ALLOWED_IMAGE_EXTENSIONS:
        raise ValidationError(f"Invalid file type. Allowed: JPG, PNG. Got: {file_ext}")

    content = await file.read()
    file_size = len(content)

    if file_size > MAX_IMAGE_SIZE:
        raise ValidationError(
            f"File too large. Max 2MB. Your file: {file_size / 1024 / 1024:.2f}MB"
        )

    # Validate it's actually an image
    try:
        img = Image.open(io.BytesIO(content))
        img.verify()
    except Exception:
        raise ValidationError("Invalid image file")

    return content
