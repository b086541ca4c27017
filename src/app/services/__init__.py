from .unit_of_work import UnitOfWork
from .payhere import PayHereConfig, PayHereSigner, format_amount

__all__ = [
    "UnitOfWork",
    "PayHereConfig",
    "PayHereSigner",
    "format_amount",
]
