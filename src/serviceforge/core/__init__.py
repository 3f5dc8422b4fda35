from serviceforge.core.service import Service
from serviceforge.core.types import LifecycleState

__all__ = ["LifecycleState", "Service"]
