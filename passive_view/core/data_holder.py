# passive_view/core/data_holder.py

import logging
import random
from itertools import count
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)

# The default inclusive range used when the caller does not pass bounds.
DEFAULT_LOW = 1
DEFAULT_HIGH = 10

ValueCallback = Callable[[int], None]


class InvalidRangeError(ValueError):
    """Raised when a lower bound is greater than its upper bound."""

    def __init__(self, lo: int, hi: int):
        super().__init__(f"Invalid range: lower bound {lo} is greater than upper bound {hi}.")
        self.lo = lo
        self.hi = hi


class SubscriptionHandle:
    """An opaque token identifying one subscription on one DataHolder."""

    __slots__ = ("_id",)

    def __init__(self, subscription_id: int):
        self._id = subscription_id

    def __repr__(self):
        return f"SubscriptionHandle({self._id})"


class DataHolder:
    """
    The "Model" of the sample. It owns a single integer and its own
    subscriber list, so two holders never see each other's notifications.

    Notifications are delivered synchronously: every subscriber has been
    called by the time `regenerate` returns.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initializes the holder with a value of 0.

        Args:
            rng: An optional random source. A private, unseeded one is used
                 when omitted, so the module-level `random` state is never touched.
        """
        self._value = 0
        self._rng = rng if rng is not None else random.Random()
        self._subscribers: Dict[int, ValueCallback] = {}
        self._ids = count(1)

    @property
    def value(self) -> int:
        return self._value

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    # --- Mutation ---

    def regenerate(self, lo: int = DEFAULT_LOW, hi: int = DEFAULT_HIGH):
        """
        Replaces the value with a uniformly distributed integer in [lo, hi]
        and publishes it to every current subscriber.

        Raises:
            InvalidRangeError: If lo > hi. The value is left unchanged.
        """
        if lo > hi:
            raise InvalidRangeError(lo, hi)

        self._value = self._rng.randint(lo, hi)
        logger.debug(f"Value regenerated in [{lo}, {hi}]: {self._value}")
        self._publish(self._value)

    def _publish(self, new_value: int):
        # Iterate over a snapshot so a callback may unsubscribe itself mid-delivery.
        for callback in list(self._subscribers.values()):
            callback(new_value)

    # --- Subscription Management ---

    def subscribe(self, callback: ValueCallback) -> SubscriptionHandle:
        """
        Registers a callback that receives every new value.

        Returns:
            A handle to pass to `unsubscribe` when the callback is no longer wanted.
        """
        handle = SubscriptionHandle(next(self._ids))
        self._subscribers[handle._id] = callback
        logger.debug(f"Added subscriber {handle}. Total subscribers: {self.subscriber_count}")
        return handle

    def unsubscribe(self, handle: SubscriptionHandle):
        """Removes a subscription. Removing an unknown or already removed handle is a no-op."""
        if self._subscribers.pop(handle._id, None) is not None:
            logger.debug(f"Removed subscriber {handle}. Total subscribers: {self.subscriber_count}")
