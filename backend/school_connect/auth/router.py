import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Depends, Response, status

from school_connect.auth.schemas import LoginRequest, RegisterRequest, UserResponse
from school_connect.auth.service import auth_service, EmailAlreadyRegistered
from school_connect.auth.dependencies import get_session_id_lenient
from school_connect.config.settings import settings
from school_connect.database import InMemoryDB, get_db
from school_connect.models import User
from school_connect.schemas import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/auth",
    tags=["authentication"]
)


def _start_session(db: InMemoryDB, response: Response, user: User) -> None:
    session = auth_service.create_session(db, user)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session.id,
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


@router.post("/login", response_model=UserResponse)
async def login(request: LoginRequest, response: Response, db: InMemoryDB = Depends(get_db)):
    """
    Authenticate with email and password and start a cookie session.
    The response body is the user without the password hash.
    """
    if not request.email or not request.password:
        raise HTTPException(status_code=400, detail="Email and password are required")

    try:
        user = auth_service.authenticate(db, request.email, request.password)
        if user is None:
            logger.info(f"Failed login attempt for {request.email}")
            raise HTTPException(status_code=401, detail="Invalid email or password")

        _start_session(db, response, user)
        logger.info(f"User {user.id} logged in")
        return user
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Login error: {e}")
        raise HTTPException(status_code=500, detail="Error logging in")


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, response: Response, db: InMemoryDB = Depends(get_db)):
    """Create an account and log it in. Role defaults to parent."""
    if not request.name or not request.email or not request.password:
        raise HTTPException(status_code=400, detail="Name, email, and password are required")

    try:
        user = auth_service.register(db, request.name, request.email, request.password, request.role)
        _start_session(db, response, user)
        return user
    except EmailAlreadyRegistered:
        raise HTTPException(status_code=400, detail="Email already registered")
    except Exception as e:
        logger.error(f"Registration error: {e}")
        raise HTTPException(status_code=500, detail="Error registering user")


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    session_id: Optional[str] = Depends(get_session_id_lenient),
    db: InMemoryDB = Depends(get_db),
):
    try:
        auth_service.destroy_session(db, session_id)
        response.delete_cookie(settings.SESSION_COOKIE_NAME)
        return {"message": "Logged out successfully"}
    except Exception as e:
        logger.error(f"Logout error: {e}")
        raise HTTPException(status_code=500, detail="Error logging out")
