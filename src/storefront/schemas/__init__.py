"""Pydantic schemas for CMS documents, queries and domain entities."""

from storefront.schemas.course import Course, CourseSchedule, CourseSeo
from storefront.schemas.editorial import BlogPost, Event, Faq, Testimonial
from storefront.schemas.jsonapi import (
    Collection,
    Document,
    JSONAPIError,
    JSONAPIErrorResponse,
    JSONAPIListResponse,
    JSONAPIResource,
    JSONAPISingleResponse,
    Relationship,
    Resource,
    ResourceRef,
)
from storefront.schemas.learning_path import LearningPath
from storefront.schemas.query import FilterCondition, PageParams, QueryParams
from storefront.schemas.taxonomy import Category, Location
from storefront.schemas.trainer import SocialLinks, Trainer

__all__ = [
    "BlogPost",
    "Category",
    "Collection",
    "Course",
    "CourseSchedule",
    "CourseSeo",
    "Document",
    "Event",
    "Faq",
    "FilterCondition",
    "JSONAPIError",
    "JSONAPIErrorResponse",
    "JSONAPIListResponse",
    "JSONAPIResource",
    "JSONAPISingleResponse",
    "LearningPath",
    "Location",
    "PageParams",
    "QueryParams",
    "Relationship",
    "Resource",
    "ResourceRef",
    "SocialLinks",
    "Testimonial",
    "Trainer",
]
