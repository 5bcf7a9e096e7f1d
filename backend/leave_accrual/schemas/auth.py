# ruff: noqa: TC003
from __future__ import annotations

import uuid
from typing import Literal

from pydantic import BaseModel

Role = Literal["employee", "admin"]


class AuthContext(BaseModel):
    """Caller identity taken from the dev ``X-Company-Id``/``X-User-Id``/``X-Role`` headers."""

    company_id: uuid.UUID
    user_id: uuid.UUID
    role: Role = "employee"

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
