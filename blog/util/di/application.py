"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.service import HomePageService
from blog.config import HomePageSettings
from blog.domain.repository import UnitOfWork
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application services provider - concrete, no mocks needed.

    Services are REQUEST-scoped so each request shares one unit of work.
    """

    scope = Scope.REQUEST

    @provide
    def get_home_page_service(
        self, unit_of_work: UnitOfWork, settings: HomePageSettings
    ) -> HomePageService:
        """Provide home page service."""
        return HomePageService(unit_of_work=unit_of_work, settings=settings)
