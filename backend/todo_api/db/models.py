from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import SQLModel, Field

class Priority(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

class Task(SQLModel):
    id: Optional[int] = Field(default=None)
    title: Optional[str] = None
    completed: bool = False
    created_at: datetime = Field(default_factory=datetime.now, nullable=False)
    # free text; HIGH / MEDIUM / LOW by convention, not enforced
    priority: Optional[str] = Priority.MEDIUM.value

    def __str__(self) -> str:
        return (
            f"Task(id={self.id}, title={self.title!r}, completed={self.completed}, "
            f"created_at={self.created_at.isoformat()}, priority={self.priority!r})"
        )
