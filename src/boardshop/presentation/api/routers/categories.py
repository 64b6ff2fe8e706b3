"""Categories router."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from boardshop.application.commands.catalog import (
    CreateCategoryCommand,
    DeleteCategoryCommand,
    UpdateCategoryCommand,
)
from boardshop.application.queries.catalog import GetCategoryQuery, ListCategoriesQuery
from boardshop.presentation.api.access_control import authorize
from boardshop.presentation.api.dependencies import RepoFactory
from boardshop.presentation.api.schemas.catalog import (
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
)
from boardshop.presentation.api.schemas.common import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(authorize)])


@router.get("", summary="List categories")
async def list_categories(factory: RepoFactory) -> list[CategoryResponse]:
    categories = await ListCategoriesQuery.from_factory(factory).execute()
    return [CategoryResponse.from_domain(c) for c in categories]


@router.get(
    "/{category_id}",
    summary="Get a category",
    responses={404: {"description": "Category not found"}},
)
async def get_category(category_id: UUID, factory: RepoFactory) -> CategoryResponse:
    category = await GetCategoryQuery.from_factory(factory).execute(category_id)
    return CategoryResponse.from_domain(category)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
    responses={409: {"description": "Category name already exists"}},
)
async def create_category(
    request: CategoryCreateRequest,
    factory: RepoFactory,
) -> CategoryResponse:
    command = CreateCategoryCommand.from_factory(factory)

    try:
        category = await command.execute(
            name=request.name,
            description=request.description,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CategoryResponse.from_domain(category)


@router.put(
    "/{category_id}",
    summary="Update a category",
    responses={
        404: {"description": "Category not found"},
        409: {"description": "Category name already exists"},
    },
)
async def update_category(
    category_id: UUID,
    request: CategoryUpdateRequest,
    factory: RepoFactory,
) -> CategoryResponse:
    command = UpdateCategoryCommand.from_factory(factory)

    try:
        category = await command.execute(
            category_id,
            name=request.name,
            description=request.description,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CategoryResponse.from_domain(category)


@router.delete(
    "/{category_id}",
    summary="Delete a category",
    responses={
        404: {"description": "Category not found"},
        409: {"description": "Category still has products"},
    },
)
async def delete_category(category_id: UUID, factory: RepoFactory) -> MessageResponse:
    command = DeleteCategoryCommand.from_factory(factory)

    try:
        await command.execute(category_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MessageResponse(message="Category deleted")
