"""Category Schemas: write DTOs and view-models for the categories resource."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


PERMITTED_FIELDS: tuple[str, ...] = ("name",)
NAME_MAX_LENGTH = 255


class CategoryCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(max_length=NAME_MAX_LENGTH)

    def permitted_fields(self) -> dict[str, Any]:
        return {"name": self.name}


class CategoryUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(None, max_length=NAME_MAX_LENGTH)

    @field_validator("name")
    @classmethod
    def reject_explicit_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v

    def permitted_fields(self) -> dict[str, Any]:
        return {
            name: getattr(self, name)
            for name in PERMITTED_FIELDS
            if name in self.model_fields_set
        }


class CategoryPostSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str


class CategoryResponse(BaseModel):
    """Category view-model; posts is the one-to-many accessor (possibly empty)."""
    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    name: str = ""
    posts: list[CategoryPostSummary] = []


class CategoryForm(BaseModel):
    category: CategoryResponse
    action: str
    method: Literal["POST", "PATCH"]
