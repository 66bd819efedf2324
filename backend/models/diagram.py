"""
Diagram domain models and schemas.

Request/response schemas for diagram rendering and the grammar table.

Dependencies: pydantic
System role: Diagram API contracts
"""

from pydantic import BaseModel, Field

from backend.models.study import DiagramCategory


class RenderRequest(BaseModel):
    """Request schema for diagram rendering."""

    markup: str = Field(description="Mermaid diagram markup")


class GrammarResponse(BaseModel):
    """One entry of the diagram grammar table."""

    category: DiagramCategory
    label: str
    dialect: str
    keyword: str = Field(description="Required top-level keyword")
    rules: list[str]
