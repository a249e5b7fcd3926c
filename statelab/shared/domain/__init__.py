from .counter import CounterModel

__all__ = ["CounterModel"]
