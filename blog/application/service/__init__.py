"""Application services consumed by the presentation layer."""

from blog.application.service.home_page import HomePageService

__all__ = ["HomePageService"]
