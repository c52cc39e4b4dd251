from fastapi import APIRouter, BackgroundTasks, Depends, status
from sqlalchemy.orm import Session

from app.config import Settings
from app.database import get_db
from app.crud import auth_crud
from app.schema.user_schema import UserCreate, UserCreated
from app.schema.auth_schema import LoginRequest, Token
from app.tasks.notifications import send_welcome_email
from app.utils.email import EmailSender, get_email_sender
from app.utils.security import get_app_settings

router = APIRouter(prefix="/auth", tags=["auth"])

# --------------------------
# Registration
# --------------------------
@router.post("/register", response_model=UserCreated, status_code=status.HTTP_201_CREATED)
def register(
    user_in: UserCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    email_sender: EmailSender = Depends(get_email_sender),
):
    user = auth_crud.register(
        db,
        name=user_in.name,
        email=user_in.email,
        password=user_in.password,
        role=user_in.role,
    )
    background_tasks.add_task(send_welcome_email, email_sender, user.name, user.email)
    return {"message": "User created successfully", "user_id": user.id}

# --------------------------
# Login
# --------------------------
@router.post("/login", response_model=Token)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    return auth_crud.login(db, settings, credentials.email, credentials.password)
