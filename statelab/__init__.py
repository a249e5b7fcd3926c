"""StateLab: ephemeral vs. shared state, shown with two Flet counter apps."""

from .shared.core.change_notifier import ChangeNotifier, SubscriptionToken
from .shared.domain.counter import CounterModel

__version__ = "0.1.0"

__all__ = ["ChangeNotifier", "SubscriptionToken", "CounterModel"]
