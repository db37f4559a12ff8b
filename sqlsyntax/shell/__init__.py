from .accumulator import LineAccumulator
from .session import ValidatorSession

__all__ = ["LineAccumulator", "ValidatorSession"]
