"""Session schema — the authenticated identity handed to every service."""

from pydantic import BaseModel, EmailStr


class Session(BaseModel):
    email: EmailStr
    access_token: str
    token_type: str = "bearer"
