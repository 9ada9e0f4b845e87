from dataclasses import dataclass
from datetime import datetime
from typing import Literal, get_args

Role = Literal["admin", "user", "viewer"]
ROLES: tuple[str, ...] = get_args(Role)

@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str
    role: str
    created_at: datetime
