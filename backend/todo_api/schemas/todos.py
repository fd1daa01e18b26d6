from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from ..db.models import Priority

class TodoCreate(BaseModel):
    title: Optional[str] = None
    priority: Optional[str] = None

class TodoUpdate(BaseModel):
    # id / createdDate sent back by clients are ignored
    title: Optional[str] = None
    completed: bool = False
    priority: Optional[str] = Priority.MEDIUM.value

class TodoOut(BaseModel):
    id: int
    title: Optional[str] = None
    completed: bool
    created_at: datetime = Field(serialization_alias="createdDate")
    priority: Optional[str] = None

    class Config:
        from_attributes = True
