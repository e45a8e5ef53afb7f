from pydantic import BaseModel
from typing import Optional

# Every request field is optional; the service layer rejects missing values with a 400.

class UserRegister(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None
    fullname: Optional[str] = None

class UserLogin(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None

class MessageResponse(BaseModel):
    message: str

class TokenResponse(MessageResponse):
    token: str
