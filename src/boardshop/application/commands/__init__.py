"""Command layer - write operations that mutate state.

Commands represent caller intentions to change system state. They
orchestrate domain objects and repositories and leave committing to the
presentation layer.

Commands are organized by domain:
- user: Accounts, profiles, addresses, preferences and avatars
- catalog: Categories, products and stock
- ordering: Order placement, editing and status changes
"""

from boardshop.application.commands.catalog import (
    CreateCategoryCommand,
    CreateProductCommand,
    DeleteCategoryCommand,
    DeleteProductCommand,
    UpdateCategoryCommand,
    UpdateProductCommand,
    UpdateStockCommand,
)
from boardshop.application.commands.ordering import (
    CreateOrderCommand,
    UpdateOrderCommand,
    UpdateOrderStatusCommand,
)
from boardshop.application.commands.user import (
    CreateAddressCommand,
    CreateUserCommand,
    DeleteAddressCommand,
    DeleteUserCommand,
    SaveUserPreferencesCommand,
    UpdateAddressCommand,
    UpdateProfileCommand,
    UpdateUserCommand,
    UploadAvatarCommand,
)

__all__ = [
    "CreateAddressCommand",
    "CreateCategoryCommand",
    "CreateOrderCommand",
    "CreateProductCommand",
    "CreateUserCommand",
    "DeleteAddressCommand",
    "DeleteCategoryCommand",
    "DeleteProductCommand",
    "DeleteUserCommand",
    "SaveUserPreferencesCommand",
    "UpdateAddressCommand",
    "UpdateCategoryCommand",
    "UpdateOrderCommand",
    "UpdateOrderStatusCommand",
    "UpdateProductCommand",
    "UpdateProfileCommand",
    "UpdateStockCommand",
    "UpdateUserCommand",
    "UploadAvatarCommand",
]
