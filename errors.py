# backend/errors.py
from fastapi import HTTPException


class AppError(HTTPException):
    """Error de aplicación con código HTTP; FastAPI lo serializa como {"detail": ...}."""

    status_code_default = 500

    def __init__(self, detail: str):
        super().__init__(status_code=self.status_code_default, detail=detail)


class ValidationError(AppError):
    status_code_default = 400


class NotFoundError(AppError):
    status_code_default = 404


class AuthError(AppError):
    status_code_default = 401
