"""Static demo data definitions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DemoUserDef:
    """Definition of a demo user row."""

    id: int
    first_name: str
    last_name: str
    email: str


DEMO_USERS: tuple[DemoUserDef, ...] = (
    DemoUserDef(
        id=1,
        first_name="John",
        last_name="Doe",
        email="john@example.com",
    ),
)
