"""Post Schemas: write DTOs with an explicit allow-list, plus show and form view-models.

Invariants:
    - PostCreate and PostUpdate accept the same PERMITTED_FIELDS; anything else is dropped
    - PostUpdate.permitted_fields() only contains keys the client actually sent
    - Title casing is NOT applied here; core/enforce_post.py owns that rule

Design Decisions:
    - extra="ignore" over extra="forbid": stray form fields are tolerated, not an error
    - Field-by-field extraction in permitted_fields() instead of model_dump(): the
      allow-list is a literal tuple a reviewer can read
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator


PERMITTED_FIELDS: tuple[str, ...] = (
    "title", "description", "author_id", "category_id", "post_status",
)


class _PostWrite(BaseModel):
    model_config = ConfigDict(extra="ignore")

    def permitted_fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        for name in PERMITTED_FIELDS:
            if name in self.model_fields_set:
                fields[name] = getattr(self, name)
        return fields


class PostCreate(_PostWrite):
    """Body of POST /posts."""
    title: str
    description: str | None = None
    author_id: int | None = None
    category_id: int | None = None
    post_status: bool = False

    def permitted_fields(self) -> dict[str, Any]:
        # Defaults count as supplied on create
        return {name: getattr(self, name) for name in PERMITTED_FIELDS}


class PostUpdate(_PostWrite):
    """Body of PATCH/PUT /posts/{id}. Every field optional."""
    title: str | None = None
    description: str | None = None
    author_id: int | None = None
    category_id: int | None = None
    post_status: bool | None = None

    @field_validator("title", "post_status")
    @classmethod
    def reject_explicit_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class PostResponse(BaseModel):
    """Single post view-model. id is None for an unsaved post."""
    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    title: str = ""
    description: str | None = None
    author_id: int | None = None
    category_id: int | None = None
    post_status: bool = False


class PostForm(BaseModel):
    """Form view-model for new/edit: the post plus where the form submits."""
    post: PostResponse
    action: str
    method: Literal["POST", "PATCH"]
