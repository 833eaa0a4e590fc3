"""Learning path entity."""

from __future__ import annotations

from storefront.schemas.base import Entity
from storefront.schemas.course import Course


class LearningPath(Entity):
    title: str = ""
    slug: str = ""
    description: str = ""
    courses: tuple[Course, ...] = ()
    total_duration: int | float = 0
    certification: str | None = None
    level: str = "intermediate"
