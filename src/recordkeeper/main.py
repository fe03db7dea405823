"""
App composition — every program is a module object registered via app.register().
"""
from __future__ import annotations

from recordkeeper.core import Application, Settings, load_settings
from recordkeeper.finance.module import finance_module
from recordkeeper.grading.module import grading_module
from recordkeeper.healthcare.module import healthcare_module
from recordkeeper.inventory.module import inventory_module
from recordkeeper.warehouse.module import warehouse_module


def create_app(settings: Settings | None = None) -> Application:
    app = Application(config=settings or load_settings())
    app.register(inventory_module)
    app.register(finance_module)
    app.register(healthcare_module)
    app.register(grading_module)
    app.register(warehouse_module)
    return app
