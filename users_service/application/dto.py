from dataclasses import dataclass

@dataclass(frozen=True)
class NewUser:
    name: str
    email: str
    role: str

@dataclass(frozen=True)
class Issue:
    path: tuple[str | int, ...]
    code: str
    message: str

    def to_dict(self) -> dict:
        return {"path": list(self.path), "code": self.code, "message": self.message}
