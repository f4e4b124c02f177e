from pydantic import BaseModel, Field
from typing import Optional

class TaskCreate(BaseModel):
    """Schema for creating new tasks.

    ``name`` is optional here: presence is checked by the store,
    so a missing name surfaces as a store failure rather than a 422.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    is_completed: Optional[bool] = Field(default=None, alias="isCompleted")

    class Config:
        populate_by_name = True

class TaskUpdate(BaseModel):
    """Schema for full or partial updates of existing tasks."""
    name: Optional[str] = None
    description: Optional[str] = None
    is_completed: Optional[bool] = Field(default=None, alias="isCompleted")

    class Config:
        populate_by_name = True

class TaskRead(BaseModel):
    """Task as it appears on the wire: ``{id, name, description, isCompleted}``."""
    id: str
    name: str = ""
    description: str = ""
    is_completed: bool = Field(default=False, alias="isCompleted")

    class Config:
        from_attributes = True
        populate_by_name = True
        frozen = True

class TaskDeleted(BaseModel):
    message: str = "Task deleted"
