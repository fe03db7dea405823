from recordkeeper.warehouse.application import WarehouseManager
from recordkeeper.warehouse.domain import ElectronicItem, GroceryItem, StockItem
from recordkeeper.warehouse.module import warehouse_module

__all__ = ["ElectronicItem", "GroceryItem", "StockItem", "WarehouseManager", "warehouse_module"]
