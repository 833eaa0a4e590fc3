"""V1 API router aggregating all sub-routers."""

from fastapi import APIRouter

from storefront.api.v1.catalog.router import (
    categories_router,
    learning_paths_router,
    trainers_router,
)
from storefront.api.v1.courses.router import router as courses_router
from storefront.api.v1.courses.router import schedules_router
from storefront.api.v1.editorial.router import (
    blog_router,
    events_router,
    faqs_router,
    testimonials_router,
)
from storefront.api.v1.system.router import router as system_router

v1_router = APIRouter()
v1_router.include_router(system_router, prefix="/system", tags=["system"])
v1_router.include_router(courses_router, prefix="/courses", tags=["courses"])
v1_router.include_router(schedules_router, prefix="/schedules", tags=["schedules"])
v1_router.include_router(trainers_router, prefix="/trainers", tags=["trainers"])
v1_router.include_router(categories_router, prefix="/categories", tags=["categories"])
v1_router.include_router(learning_paths_router, prefix="/learning-paths", tags=["learning-paths"])
v1_router.include_router(blog_router, prefix="/blog", tags=["blog"])
v1_router.include_router(events_router, prefix="/events", tags=["events"])
v1_router.include_router(faqs_router, prefix="/faqs", tags=["faqs"])
v1_router.include_router(testimonials_router, prefix="/testimonials", tags=["testimonials"])
