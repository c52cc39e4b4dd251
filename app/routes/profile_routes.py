# app/routes/profile_routes.py
from fastapi import APIRouter, Depends, UploadFile, File, Form
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session
from typing import Optional
from app.database import get_db
from app.crud import user_crud
from app.schema.auth_schema import TokenData
from app.schema.user_schema import ProfileUpdated
from app.utils.security import get_current_user
from app.utils.cloudinary_client import AvatarStorage, get_avatar_storage
from app.utils.file_validators import validate_image_file

router = APIRouter(prefix="/profile", tags=["profile"])


@router.put("", response_model=ProfileUpdated)
async def update_profile(
    bio: Optional[str] = Form(None),
    avatar: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(get_current_user),
    storage: AvatarStorage = Depends(get_avatar_storage),
):
    """
    Update bio and/or avatar. The avatar is validated, pushed to Cloudinary
    and only its public URL is stored on the user.

    Form fields sent empty count as omitted, so an empty `bio` leaves the
    stored bio unchanged rather than clearing it.
    """
    avatar_url = None

    if avatar is not None and avatar.filename:
        content = await validate_image_file(avatar)
        # Cloudinary and the session are blocking; keep them off the event loop
        avatar_url = await run_in_threadpool(storage.upload, content, current_user.id)

    await run_in_threadpool(user_crud.update_profile, db, current_user.id, bio=bio, avatar_url=avatar_url)

    return {"message": "Profile updated successfully", "avatar": avatar_url}
