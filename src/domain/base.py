"""Shared base for domain entities"""

import uuid
from datetime import datetime, timezone
from sqlmodel import SQLModel


def generate_uuid() -> str:
    """Opaque string identifier for new entities"""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Timezone-aware current UTC time used for every persisted timestamp"""
    return datetime.now(timezone.utc)


class BaseModel(SQLModel):
    """Base class for all SQLModel domain entities"""

    pass
