# passive_view/gui/coordinator.py

import enum
import logging
import random
import weakref
from typing import Callable, Optional, Protocol

from passive_view.core.data_holder import DataHolder, SubscriptionHandle
from passive_view.core.settings import AppSettings

logger = logging.getLogger(__name__)


class Surface(Protocol):
    """What the Coordinator needs from a view. The Qt DisplaySurface is one; tests use fakes."""

    def set_label_text(self, text: str) -> None: ...

    def on_button_tap(self, callback: Callable[[], None]) -> None: ...


class CoordinatorState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    BOUND = "bound"


class CoordinatorStateError(RuntimeError):
    """Raised when the Coordinator is used out of its lifecycle order."""


class Coordinator:
    """
    The "Presenter". It wires the surface's button to the DataHolder and the
    DataHolder's notifications back to the surface's label. The surface stays
    completely passive: every decision happens here.
    """

    def __init__(self, surface: Surface, settings: Optional[AppSettings] = None):
        self.surface = surface
        self.settings = settings if settings is not None else AppSettings()
        self._data_holder: Optional[DataHolder] = None
        self._subscription: Optional[SubscriptionHandle] = None
        self._state = CoordinatorState.UNINITIALIZED

    @property
    def state(self) -> CoordinatorState:
        return self._state

    @property
    def data_holder(self) -> Optional[DataHolder]:
        return self._data_holder

    # --- Lifecycle ---

    def start(self):
        """
        Binds the surface to a fresh DataHolder. Called once, when the view is ready.

        Raises:
            CoordinatorStateError: If the Coordinator was already started.
        """
        if self._state is CoordinatorState.BOUND:
            raise CoordinatorStateError("Coordinator.start() must be called exactly once.")

        rng = random.Random(self.settings.seed) if self.settings.seed is not None else None
        self._data_holder = DataHolder(rng)

        self.surface.set_label_text(str(self._data_holder.value))
        self.surface.on_button_tap(self._weak_callback(self.handle_tap))
        self._subscription = self._data_holder.subscribe(self._weak_callback(self._on_value_changed))

        self._state = CoordinatorState.BOUND
        logger.info(f"Coordinator bound. Range: [{self.settings.low}, {self.settings.high}]")

    def teardown(self):
        """Releases the subscription. Safe to call more than once, or before `start`."""
        if self._data_holder is not None and self._subscription is not None:
            self._data_holder.unsubscribe(self._subscription)
            self._subscription = None
            logger.info("Coordinator torn down, subscription released.")

    # --- Event Handling ---

    def handle_tap(self):
        """The button's tap handler: asks the DataHolder for a new number."""
        if self._data_holder is None:
            raise CoordinatorStateError("Button tapped before the Coordinator was started.")
        self._data_holder.regenerate(self.settings.low, self.settings.high)

    @staticmethod
    def _weak_callback(bound_method: Callable) -> Callable:
        # Neither the surface nor the DataHolder may keep the Coordinator alive.
        method_ref = weakref.WeakMethod(bound_method)

        def callback(*args):
            method = method_ref()
            if method is None:
                logger.debug(f"Coordinator already collected, dropping call with {args}.")
                return
            method(*args)

        return callback

    def _on_value_changed(self, new_value: int):
        self.surface.set_label_text(str(new_value))
