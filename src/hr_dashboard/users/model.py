from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Identity:
    """Domain entity: a known user.

    Note: plain data object, immutable after sign-up.
    """

    id: str
    email: str
    first_name: str
    last_name: str
    role: Role

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "role": self.role.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Identity":
        return cls(
            id=str(data["id"]),
            email=str(data["email"]),
            first_name=str(data.get("firstName") or ""),
            last_name=str(data.get("lastName") or ""),
            role=Role(data.get("role") or Role.EMPLOYEE.value),
        )


DEMO_IDENTITIES = (
    Identity(id="1", email="admin@company.com", first_name="Admin", last_name="User", role=Role.ADMIN),
    Identity(id="2", email="john@company.com", first_name="John", last_name="Doe", role=Role.EMPLOYEE),
    Identity(id="3", email="jane@company.com", first_name="Jane", last_name="Smith", role=Role.EMPLOYEE),
)
