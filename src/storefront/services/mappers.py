"""Map CMS resources to domain entities.

One pure function per content type: ``map_x(resource, included=None)``.
Attributes go through the declarative schemas below and
``decode_attributes``; relationship-derived fields go through the
resolver. Mappers are tenant-agnostic and never raise on missing or
malformed content.
"""

from __future__ import annotations

from storefront.schemas.course import Course, CourseSchedule, CourseSeo
from storefront.schemas.editorial import BlogPost, Event, Faq, Testimonial
from storefront.schemas.jsonapi import Resource
from storefront.schemas.learning_path import LearningPath
from storefront.schemas.taxonomy import Category, Location
from storefront.schemas.trainer import SocialLinks, Trainer
from storefront.services.decoding import FieldKind, FieldSpec, decode_attributes
from storefront.services.resolver import (
    Included,
    as_index,
    related_id,
    resolve_many,
    resolve_media_url,
    resolve_one,
)

K = FieldKind

# ---------------------------------------------------------------------------
# Attribute schemas
# ---------------------------------------------------------------------------

COURSE_FIELDS = {
    "title": FieldSpec("title"),
    "slug": FieldSpec("field_slug"),
    "description": FieldSpec("field_description", K.RICH_TEXT),
    "short_description": FieldSpec("field_short_description"),
    "duration": FieldSpec("field_duration", K.NUMBER),
    "duration_unit": FieldSpec("field_duration_unit", K.ENUM, "days"),
    "level": FieldSpec("field_level", K.ENUM, "intermediate"),
    "price_display": FieldSpec("field_price_display"),
    "basz_id": FieldSpec("field_basz_id"),
    "created_at": FieldSpec("created"),
    "updated_at": FieldSpec("changed"),
}

COURSE_SEO_FIELDS = {
    "title": FieldSpec(("field_seo_title", "title")),
    "description": FieldSpec("field_seo_description"),
}

SCHEDULE_FIELDS = {
    "start_date": FieldSpec("field_start_date"),
    "end_date": FieldSpec("field_end_date"),
    "seats_display": FieldSpec("field_seats_display"),
    "status": FieldSpec("field_status", K.ENUM, "scheduled"),
    "basz_id": FieldSpec("field_basz_id"),
}

TRAINER_FIELDS = {
    "name": FieldSpec("title"),
    "slug": FieldSpec("field_slug"),
    "bio": FieldSpec("field_bio", K.RICH_TEXT),
    "photo_url": FieldSpec("field_photo_url", K.OPTIONAL_TEXT),
    "specializations": FieldSpec("field_specializations", K.STRING_LIST),
}

SOCIAL_LINK_FIELDS = {
    "linkedin": FieldSpec("field_linkedin", K.LINK),
    "twitter": FieldSpec("field_twitter", K.LINK),
}

CATEGORY_FIELDS = {
    "name": FieldSpec("name"),
    "slug": FieldSpec("field_slug"),
    "description": FieldSpec("description", K.OPTIONAL_RICH_TEXT),
}

LOCATION_FIELDS = {
    "name": FieldSpec("title"),
    "city": FieldSpec("field_city"),
    "address": FieldSpec("field_address", K.OPTIONAL_TEXT),
    "type": FieldSpec("field_type", K.ENUM, "classroom"),
}

LEARNING_PATH_FIELDS = {
    "title": FieldSpec("title"),
    "slug": FieldSpec("field_slug"),
    "description": FieldSpec("body", K.RICH_TEXT),
    "total_duration": FieldSpec("field_total_duration", K.NUMBER),
    "certification": FieldSpec("field_certification", K.OPTIONAL_TEXT),
    "level": FieldSpec("field_level", K.ENUM, "intermediate"),
}

BLOG_POST_FIELDS = {
    "title": FieldSpec("title"),
    "slug": FieldSpec("field_slug"),
    "excerpt": FieldSpec("field_excerpt"),
    "body": FieldSpec("body", K.RICH_TEXT),
    "author": FieldSpec("field_author"),
    "image_url": FieldSpec("field_image_url", K.OPTIONAL_TEXT),
    "categories": FieldSpec("field_categories", K.STRING_LIST),
    "tags": FieldSpec("field_tags", K.STRING_LIST),
    "published_at": FieldSpec("created"),
}

EVENT_FIELDS = {
    "title": FieldSpec("title"),
    "slug": FieldSpec("field_slug"),
    "description": FieldSpec("body", K.RICH_TEXT),
    "event_date": FieldSpec("field_event_date"),
    "event_end_date": FieldSpec("field_event_end_date", K.OPTIONAL_TEXT),
    "location": FieldSpec("field_location"),
    "type": FieldSpec("field_event_type", K.ENUM, "webinar"),
    "registration_url": FieldSpec("field_registration_url", K.LINK),
    "image_url": FieldSpec("field_image_url", K.OPTIONAL_TEXT),
}

FAQ_FIELDS = {
    "question": FieldSpec("title"),
    "answer": FieldSpec("body", K.RICH_TEXT),
    "category": FieldSpec("field_category"),
    "order": FieldSpec("field_order", K.NUMBER),
}

TESTIMONIAL_FIELDS = {
    "quote": FieldSpec("field_quote"),
    "author_name": FieldSpec("field_author_name"),
    "author_company": FieldSpec("field_author_company", K.OPTIONAL_TEXT),
    "author_role": FieldSpec("field_author_role", K.OPTIONAL_TEXT),
    "rating": FieldSpec("field_rating", K.OPTIONAL_NUMBER),
}


# ---------------------------------------------------------------------------
# Mappers
# ---------------------------------------------------------------------------


def map_category(resource: Resource, included: Included = None) -> Category:
    return Category(
        id=resource.id,
        parent_id=related_id(resource.relationship("parent")),
        **decode_attributes(resource.attributes, CATEGORY_FIELDS),
    )


def map_location(resource: Resource, included: Included = None) -> Location:
    return Location(id=resource.id, **decode_attributes(resource.attributes, LOCATION_FIELDS))


def map_trainer(resource: Resource, included: Included = None) -> Trainer:
    return Trainer(
        id=resource.id,
        social_links=SocialLinks(
            **decode_attributes(resource.attributes, SOCIAL_LINK_FIELDS)
        ),
        **decode_attributes(resource.attributes, TRAINER_FIELDS),
    )


def map_course(
    resource: Resource,
    included: Included = None,
    *,
    with_related: bool = True,
) -> Course:
    """Map a ``node--course`` resource.

    Categories, trainers and the image come from ``included``. Related
    courses are mapped with ``with_related=False`` so that mutually
    related courses cannot recurse.
    """
    index = as_index(included)
    related: list[Course] = []
    if with_related:
        related = [
            map_course(r, index, with_related=False)
            for r in resolve_many(resource.relationship("field_related_courses"), index)
        ]

    return Course(
        id=resource.id,
        image_url=resolve_media_url(resource.relationship("field_image"), index),
        categories=[
            map_category(r, index)
            for r in resolve_many(resource.relationship("field_category"), index)
        ],
        trainers=[
            map_trainer(r, index)
            for r in resolve_many(resource.relationship("field_trainer"), index)
        ],
        related_courses=related,
        seo=CourseSeo(**decode_attributes(resource.attributes, COURSE_SEO_FIELDS)),
        **decode_attributes(resource.attributes, COURSE_FIELDS),
    )


def map_schedule(resource: Resource, included: Included = None) -> CourseSchedule:
    """Map a ``node--course_schedule`` resource.

    ``course_id`` is read from the linkage itself, so it is available even
    when the course was not included.
    """
    index = as_index(included)
    location = resolve_one(resource.relationship("field_location"), index)
    instructor = resolve_one(resource.relationship("field_instructor"), index)

    return CourseSchedule(
        id=resource.id,
        course_id=related_id(resource.relationship("field_course")) or "",
        location=map_location(location) if location is not None else None,
        instructor=map_trainer(instructor) if instructor is not None else None,
        **decode_attributes(resource.attributes, SCHEDULE_FIELDS),
    )


def map_learning_path(resource: Resource, included: Included = None) -> LearningPath:
    index = as_index(included)
    return LearningPath(
        id=resource.id,
        courses=[
            map_course(r, index, with_related=False)
            for r in resolve_many(resource.relationship("field_courses"), index)
        ],
        **decode_attributes(resource.attributes, LEARNING_PATH_FIELDS),
    )


def map_blog_post(resource: Resource, included: Included = None) -> BlogPost:
    return BlogPost(id=resource.id, **decode_attributes(resource.attributes, BLOG_POST_FIELDS))


def map_event(resource: Resource, included: Included = None) -> Event:
    return Event(id=resource.id, **decode_attributes(resource.attributes, EVENT_FIELDS))


def map_faq(resource: Resource, included: Included = None) -> Faq:
    return Faq(id=resource.id, **decode_attributes(resource.attributes, FAQ_FIELDS))


def map_testimonial(resource: Resource, included: Included = None) -> Testimonial:
    return Testimonial(
        id=resource.id,
        course_id=related_id(resource.relationship("field_course")),
        **decode_attributes(resource.attributes, TESTIMONIAL_FIELDS),
    )
