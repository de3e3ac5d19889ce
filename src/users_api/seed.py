"""Fixture users loaded into a fresh store."""

from __future__ import annotations

from .models import User

DEFAULT_USERS: tuple[User, ...] = (
    User(id="1", name="John Doe", email="john.doe@example.com"),
    User(id="2", name="Jane Doe", email="jane.doe@example.com"),
    User(id="3", name="John Smith", email="john.smith@example.com"),
    User(id="4", name="Jane Smith", email="jane.smith@example.com"),
    User(id="5", name="Robert Johnson", email="robert.johnson@example.com"),
    User(id="6", name="Emily Williams", email="emily.williams@example.com"),
    User(id="7", name="Michael Brown", email="michael.brown@example.com"),
    User(id="8", name="Sarah Davis", email="sarah.davis@example.com"),
)
