"""Admin request/response models."""

from typing import Any, Dict, Optional

from pydantic import BaseModel


class AdminLoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class AdminLoginResponse(BaseModel):
    success: bool
    token: str
    message: str


class AdminJobActionResponse(BaseModel):
    success: bool
    message: str
    job: Dict[str, Any]
