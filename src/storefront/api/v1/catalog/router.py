"""Trainer, category and learning path endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from storefront.api.deps import get_cms_client
from storefront.api.v1.resources import list_response, single_response
from storefront.schemas.jsonapi import JSONAPIListResponse, JSONAPISingleResponse
from storefront.services.cms_client import CmsClient

trainers_router = APIRouter()
categories_router = APIRouter()
learning_paths_router = APIRouter()


@trainers_router.get("")
async def list_trainers(cms: CmsClient = Depends(get_cms_client)) -> JSONAPIListResponse:
    return list_response("trainers", await cms.get_trainers())


@trainers_router.get("/{slug}")
async def get_trainer(
    slug: str,
    cms: CmsClient = Depends(get_cms_client),
) -> JSONAPISingleResponse:
    return single_response("trainers", await cms.get_trainer(slug), "Trainer")


@categories_router.get("")
async def list_categories(cms: CmsClient = Depends(get_cms_client)) -> JSONAPIListResponse:
    return list_response("categories", await cms.get_categories())


@learning_paths_router.get("")
async def list_learning_paths(
    cms: CmsClient = Depends(get_cms_client),
) -> JSONAPIListResponse:
    return list_response("learning-paths", await cms.get_learning_paths())


@learning_paths_router.get("/{slug}")
async def get_learning_path(
    slug: str,
    cms: CmsClient = Depends(get_cms_client),
) -> JSONAPISingleResponse:
    return single_response(
        "learning-paths", await cms.get_learning_path(slug), "Learning path"
    )
