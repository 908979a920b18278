from pydantic import BaseModel, EmailStr, Field, model_validator
from typing import Optional

PASSWORD_MIN_LENGTH = 8


class SignUpIn(BaseModel):
    email: EmailStr
    password: str = Field(min_length=PASSWORD_MIN_LENGTH)
    confirm_password: str

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class LoginIn(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class AuthUserOut(BaseModel):
    id: str
    email: Optional[str] = None


class AuthResult(BaseModel):
    success: bool = True
    message: Optional[str] = None
    user: Optional[AuthUserOut] = None
