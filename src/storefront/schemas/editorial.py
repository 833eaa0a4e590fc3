"""Editorial content entities: blog posts, events, FAQs and testimonials."""

from __future__ import annotations

from storefront.schemas.base import Entity


class BlogPost(Entity):
    title: str = ""
    slug: str = ""
    excerpt: str = ""
    body: str = ""
    author: str = ""
    image_url: str | None = None
    categories: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    published_at: str = ""


class Event(Entity):
    """A dated event.

    ``type`` is normally ``webinar``, ``workshop``, ``conference`` or
    ``meetup``.
    """

    title: str = ""
    slug: str = ""
    description: str = ""
    event_date: str = ""
    event_end_date: str | None = None
    location: str = ""
    type: str = "webinar"
    registration_url: str | None = None
    image_url: str | None = None


class Faq(Entity):
    question: str = ""
    answer: str = ""
    category: str = ""
    order: int | float = 0


class Testimonial(Entity):
    quote: str = ""
    author_name: str = ""
    author_company: str | None = None
    author_role: str | None = None
    course_id: str | None = None
    rating: int | float | None = None
