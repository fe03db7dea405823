from recordkeeper.inventory.domain import InventoryItem
from recordkeeper.inventory.infrastructure import InventoryLogger
from recordkeeper.inventory.module import inventory_module

__all__ = ["InventoryItem", "InventoryLogger", "inventory_module"]
