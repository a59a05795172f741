"""
Application error kinds.

Each kind maps to exactly one HTTP status in ``contacts_api.main``; anything
else reaching the boundary is reported as an internal error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class AppError(Exception):
    message: str = "Application error"
    details: Optional[dict[str, Any]] = None

    code = "APP_ERROR"

    def __str__(self) -> str:
        return self.message


class NotFoundError(AppError):
    code = "NOT_FOUND"


class ValidationError(AppError):
    code = "VALIDATION_ERROR"


class ConflictError(AppError):
    code = "CONFLICT"
