from boardshop.domain.user.entities.address import Address

__all__ = ["Address"]
