"""Categories Routes: full CRUD plus the GET /categories/show?id= alias.

Invariants:
    - Same redirect contract as posts: 303 to GET /categories/{id} after create/update
    - destroy redirects 303 to GET /categories
    - /categories/show without an id query parameter is MalformedInputError (400)
"""

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import MalformedInputError
from app.infrastructure.database import get_db
from app.schemas.category import (
    CategoryCreate, CategoryUpdate, CategoryResponse, CategoryForm,
)
from app.services.handle_categories import CategoryHandlers

router = APIRouter(prefix="/categories", tags=["categories"])


def get_category_handlers(db: AsyncSession = Depends(get_db)) -> CategoryHandlers:
    return CategoryHandlers(db)


def _redirect(request: Request, name: str, **params) -> RedirectResponse:
    return RedirectResponse(
        str(request.app.url_path_for(name, **params)),
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.get("", response_model=list[CategoryResponse], name="index_categories")
async def index_categories(
    handlers: CategoryHandlers = Depends(get_category_handlers),
):
    return [CategoryResponse.model_validate(c) for c in await handlers.index()]


@router.get("/show", response_model=CategoryResponse, name="show_category_alias")
async def show_category_alias(
    category_id: int | None = Query(None, alias="id", ge=0),
    handlers: CategoryHandlers = Depends(get_category_handlers),
):
    """Static alias for show; the id comes from the query string."""
    if category_id is None:
        raise MalformedInputError("Query parameter 'id' is required", "id")
    return CategoryResponse.model_validate(await handlers.show(category_id))


@router.get("/new", response_model=CategoryForm, name="new_category")
async def new_category(
    request: Request,
    handlers: CategoryHandlers = Depends(get_category_handlers),
):
    return CategoryForm(
        category=CategoryResponse.model_validate(handlers.new()),
        action=str(request.app.url_path_for("create_category")),
        method="POST",
    )


@router.post("", name="create_category")
async def create_category(
    body: CategoryCreate,
    request: Request,
    handlers: CategoryHandlers = Depends(get_category_handlers),
):
    category = await handlers.create(body)
    return _redirect(request, "show_category", category_id=category.id)


@router.get(
    "/{category_id:int}", response_model=CategoryResponse, name="show_category",
)
async def show_category(
    category_id: int,
    handlers: CategoryHandlers = Depends(get_category_handlers),
):
    return CategoryResponse.model_validate(await handlers.show(category_id))


@router.get(
    "/{category_id:int}/edit", response_model=CategoryForm, name="edit_category",
)
async def edit_category(
    category_id: int,
    request: Request,
    handlers: CategoryHandlers = Depends(get_category_handlers),
):
    category = await handlers.edit(category_id)
    return CategoryForm(
        category=CategoryResponse.model_validate(category),
        action=str(request.app.url_path_for(
            "update_category", category_id=category.id,
        )),
        method="PATCH",
    )


@router.api_route(
    "/{category_id:int}", methods=["PATCH", "PUT"], name="update_category",
)
async def update_category(
    category_id: int,
    body: CategoryUpdate,
    request: Request,
    handlers: CategoryHandlers = Depends(get_category_handlers),
):
    category = await handlers.update(category_id, body)
    return _redirect(request, "show_category", category_id=category.id)


@router.delete("/{category_id:int}", name="destroy_category")
async def destroy_category(
    category_id: int,
    request: Request,
    handlers: CategoryHandlers = Depends(get_category_handlers),
):
    await handlers.destroy(category_id)
    return _redirect(request, "index_categories")
