"""Application factories for repository access."""

from boardshop.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
