import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel, field_validator
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from backend.auth import jwt_handler
from backend.auth.dependencies import SessionIdentity, get_current_identity
from backend.auth.passwords import MAX_PASSWORD_BYTES, hash_password, verify_password
from backend.core import config
from backend.database import database_unavailable, get_db
from backend.models.user import User

router = APIRouter(tags=['auth'])

logger = logging.getLogger(__name__)


def normalize_email(value: str) -> str:
    normalized = value.strip().lower()
    if not normalized:
        raise ValueError('Email is required.')
    return normalized


class RegisterRequest(BaseModel):
    name: str
    email: str
    password: str

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str) -> str:
        return normalize_email(value)

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value:
            raise ValueError('Password is required.')
        if len(value.encode('utf-8')) > MAX_PASSWORD_BYTES:
            raise ValueError(f'Password must be {MAX_PASSWORD_BYTES} bytes or fewer.')
        return value


class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str) -> str:
        return normalize_email(value)


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    role: str

    class Config:
        from_attributes = True


class LoginResponse(BaseModel):
    Status: str
    role: str


class HomeResponse(BaseModel):
    email: str
    name: str


@router.post('/', response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    user = User(
        name=data.name,
        email=data.email,
        hashed_password=hash_password(data.password),
        role=config.DEFAULT_ROLE,
    )

    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError as exc:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail='Email is already registered.',
        ) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        raise database_unavailable() from exc

    logger.info('Registered user %s', user.email)
    return user


@router.post('/login', response_model=LoginResponse)
def login(data: LoginRequest, response: Response, db: Session = Depends(get_db)):
    try:
        user = db.query(User).filter(User.email == data.email).first()
    except SQLAlchemyError as exc:
        raise database_unavailable() from exc

    if user is None:
        logger.warning('Login failed for %s: unknown user', data.email)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Invalid user')

    if not verify_password(data.password, user.hashed_password):
        logger.warning('Login failed for %s: wrong password', data.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail='Invalid password')

    token = jwt_handler.create_access_token(email=user.email, role=user.role)
    response.set_cookie(
        config.SESSION_COOKIE_NAME,
        token,
        max_age=int(jwt_handler.token_lifetime().total_seconds()),
        httponly=True,
        samesite='lax',
        secure=config.COOKIE_SECURE,
    )

    logger.info('Login success for %s', user.email)
    return LoginResponse(Status='login success', role=user.role)


@router.get('/home', response_model=HomeResponse)
def home(identity: SessionIdentity = Depends(get_current_identity), db: Session = Depends(get_db)):
    try:
        user = db.query(User).filter(User.email == identity.email).first()
    except SQLAlchemyError as exc:
        raise database_unavailable() from exc

    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='User not found')

    return HomeResponse(email=user.email, name=user.name)


@router.get('/getalluserdata', response_model=list[UserResponse])
def list_users(db: Session = Depends(get_db)):
    try:
        return db.query(User).order_by(User.id.asc()).all()
    except SQLAlchemyError as exc:
        raise database_unavailable() from exc


@router.get('/logout')
def logout(response: Response):
    response.delete_cookie(config.SESSION_COOKIE_NAME)
    return 'cookie cleared'
