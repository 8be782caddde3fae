from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# Plain strings: the seeded accounts live on reserved domains (.test) that
# strict email validation refuses.
class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    is_admin: bool = False
    email_verified_at: Optional[datetime] = None


class LoginRequest(BaseModel):
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1)


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
