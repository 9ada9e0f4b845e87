"""Проверка входных данных пользователя.

Возвращает размеченный результат (Valid / Invalid) вместо исключений,
вызывающий код обязан явно разобрать оба варианта.
"""
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError

from ..domain.entities import Role
from .dto import Issue, NewUser


class UserSchema(BaseModel):
    # Лишние поля молча отбрасываются
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=2)
    email: EmailStr
    role: Role


@dataclass(frozen=True)
class Valid:
    value: NewUser


@dataclass(frozen=True)
class Invalid:
    issues: tuple[Issue, ...]


ValidationResult = Valid | Invalid


def issue_from_error(err: dict) -> Issue:
    """Преобразует ошибку pydantic в Issue."""
    return Issue(path=tuple(err.get("loc", ())), code=err["type"], message=err["msg"])


def validate_new_user(payload: Any) -> ValidationResult:
    try:
        data = UserSchema.model_validate(payload)
    except ValidationError as e:
        return Invalid(issues=tuple(issue_from_error(err) for err in e.errors(include_url=False)))
    return Valid(value=NewUser(name=data.name, email=data.email, role=data.role))
