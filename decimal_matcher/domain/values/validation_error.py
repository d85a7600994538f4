from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    code: str
    message: str

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("Validation error code cannot be empty")

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "message": self.message}
