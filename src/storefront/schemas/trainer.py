"""Trainer entity."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from storefront.schemas.base import Entity


class SocialLinks(BaseModel):
    model_config = ConfigDict(frozen=True)

    linkedin: str | None = None
    twitter: str | None = None


class Trainer(Entity):
    name: str = ""
    slug: str = ""
    bio: str = ""
    photo_url: str | None = None
    specializations: tuple[str, ...] = ()
    social_links: SocialLinks = SocialLinks()
