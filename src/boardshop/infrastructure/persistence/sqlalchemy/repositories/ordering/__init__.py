from boardshop.infrastructure.persistence.sqlalchemy.repositories.ordering.order_repository import (  # NOQA: E501
    OrderRepositorySQLAlchemy,
)

__all__ = ["OrderRepositorySQLAlchemy"]
