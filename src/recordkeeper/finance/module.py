"""Finance program: payment channels and a savings account."""
from recordkeeper.core import ProgramModule

from .application import FinanceService
from .infrastructure import ProcessorTable


class RunFinance:
    def __init__(self, service: FinanceService):
        self._service = service

    def __call__(self) -> int:
        self._service.run()
        return 0


finance_module = (
    ProgramModule("finance", "Transactions through payment channels applied to a savings account")
    .bind(ProcessorTable)
    .bind(FinanceService)
    .entrypoint(RunFinance)
)
