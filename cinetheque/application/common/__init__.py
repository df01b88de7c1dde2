from .option import NOTHING, Nothing, Option, Some, option_of
from .unit_of_work import UnitOfWork

__all__ = ["NOTHING", "Nothing", "Option", "Some", "UnitOfWork", "option_of"]
