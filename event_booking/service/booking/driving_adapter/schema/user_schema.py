from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class UserCreateRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={'example': {'name': 'Alice', 'email': 'alice@example.com'}}
    )


class UserCreatedResponse(BaseModel):
    id: int
    name: str
    email: str


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None
