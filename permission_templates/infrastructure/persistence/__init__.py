"""Persistence layer (SQLAlchemy).

Usage:
    from permission_templates.infrastructure.persistence import BaseModel, Database
"""

from permission_templates.infrastructure.persistence.base import (
    BaseModel,
    BaseMutableModel,
)
from permission_templates.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "BaseMutableModel", "Database"]
