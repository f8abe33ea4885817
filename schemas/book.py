from typing import Any, List
from pydantic import BaseModel, Field


class BookDetailView(BaseModel):
    title: str
    author: str
    copies: List[Any] = Field(default_factory=list)
