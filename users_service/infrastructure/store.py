import threading
from datetime import datetime, timezone
from typing import Callable

from ..domain.entities import User
from .ids import IdAllocator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserStore:
    """Хранилище пользователей в памяти процесса.

    Один lock защищает выделение id + вставку и удаление, поэтому
    id остаются уникальными и упорядоченными при работе из threadpool.
    """

    def __init__(self, ids: IdAllocator | None = None, clock: Callable[[], datetime] = utcnow):
        self._users: dict[int, User] = {}
        self._ids = ids if ids is not None else IdAllocator()
        self._clock = clock
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._users)

    def create(self, name: str, email: str, role: str) -> User:
        with self._lock:
            user = User(id=self._ids.allocate(), name=name, email=email, role=role, created_at=self._clock())
            self._users[user.id] = user
        return user

    def list(self) -> tuple[list[User], int]:
        with self._lock:
            users = list(self._users.values())
        return users, len(users)

    def get_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def delete_by_id(self, user_id: int) -> bool:
        with self._lock:
            return self._users.pop(user_id, None) is not None
