# backend/auth/models.py
from pydantic import BaseModel, EmailStr
from models.user import User, UserCreate


class UserRegister(UserCreate):
    pass

class UserLogin(BaseModel):
    email: EmailStr
    password: str

class AuthResponse(BaseModel):
    token: str
    expires_in: int
    user: User
