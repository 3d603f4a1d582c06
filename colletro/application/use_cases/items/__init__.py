"""Item use cases."""

from colletro.application.use_cases.items.item_operations import ItemService

__all__ = ["ItemService"]
