"""Course and course schedule entities."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from storefront.schemas.base import Entity
from storefront.schemas.taxonomy import Category, Location
from storefront.schemas.trainer import Trainer


class CourseSeo(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: str = ""


class Course(Entity):
    """A course synced into the CMS from the product catalogue.

    ``level`` is normally one of ``beginner``, ``intermediate``,
    ``advanced`` or ``expert`` and ``duration_unit`` one of ``days`` or
    ``hours``; both are carried verbatim. ``related_courses`` is only
    populated one level deep.
    """

    title: str = ""
    slug: str = ""
    description: str = ""
    short_description: str = ""
    duration: int | float = 0
    duration_unit: str = "days"
    level: str = "intermediate"
    price_display: str = ""
    image_url: str | None = None
    categories: tuple[Category, ...] = ()
    trainers: tuple[Trainer, ...] = ()
    related_courses: tuple[Course, ...] = ()
    seo: CourseSeo = CourseSeo()
    basz_id: str = ""
    created_at: str = ""
    updated_at: str = ""


class CourseSchedule(Entity):
    """A planned run of a course.

    ``status`` is normally ``scheduled``, ``confirmed`` or ``cancelled``.
    """

    course_id: str = ""
    start_date: str = ""
    end_date: str = ""
    location: Location | None = None
    instructor: Trainer | None = None
    seats_display: str = ""
    status: str = "scheduled"
    basz_id: str = ""
