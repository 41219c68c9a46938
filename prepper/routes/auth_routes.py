from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from prepper.auth.dependencies import get_current_claims
from prepper.database import DocumentStore, get_store
from prepper.models.user import Claims, UserSummary
from prepper.services import auth_service

router = APIRouter(tags=['auth'])


class SignupRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserSummary


@router.post('/signup', response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(payload: SignupRequest, store: DocumentStore = Depends(get_store)):
    token, user = auth_service.signup(store, payload.name, payload.email, payload.password)
    return {'message': 'User created successfully', 'token': token, 'user': user}


@router.post('/login', response_model=AuthResponse)
def login(payload: LoginRequest, store: DocumentStore = Depends(get_store)):
    token, user = auth_service.login(store, payload.email, payload.password)
    return {'message': 'Login successful', 'token': token, 'user': user}


@router.get('/me', response_model=UserSummary)
def me(claims: Claims = Depends(get_current_claims), store: DocumentStore = Depends(get_store)):
    return auth_service.current_user(store, claims)
