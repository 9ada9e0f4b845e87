from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True, alias_generator=to_camel)
    id: int
    name: str
    email: str
    role: str
    created_at: datetime

class UserListOut(BaseModel):
    count: int
    data: list[UserOut]

class HealthOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True, alias_generator=to_camel)
    status: str
    uptime: float
    timestamp: str
    memory_usage: dict[str, int]

class ServiceInfo(BaseModel):
    name: str
    version: str
    endpoints: list[str]

class ErrorOut(BaseModel):
    error: str | list[dict[str, Any]]
