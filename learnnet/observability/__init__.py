from .instrumentation import Instrumentation, NoOpInstrumentation
from .timer import Timer

__all__ = ["Instrumentation", "NoOpInstrumentation", "Timer"]
