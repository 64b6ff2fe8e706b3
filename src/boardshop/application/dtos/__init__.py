from boardshop.application.dtos.catalog import ProductPage
from boardshop.application.dtos.user import UserProfile

__all__ = ["ProductPage", "UserProfile"]
