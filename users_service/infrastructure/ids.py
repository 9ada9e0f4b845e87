class IdAllocator:
    """Выдаёт возрастающие целые id начиная со start. Удаления не откатывают счётчик."""

    def __init__(self, start: int = 1):
        self._next = start

    def allocate(self) -> int:
        value = self._next
        self._next += 1
        return value
