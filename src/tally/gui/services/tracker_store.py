from __future__ import annotations

"""
Tracker Store - Holds the current tracker state for the GUI

Widgets never change state directly. They emit intents, the store applies
them through TrackerService and publishes the resulting state.
"""

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from tally.model.intents import Intent
from tally.model.seed import seed_state
from tally.model.state import TrackerState
from tally.services.tracker_service import TrackerService, UpdateResult

logger = logging.getLogger(__name__)


class TrackerStore(QObject):
    """Single mutation boundary for the tracker screen."""

    # Emitted with the new TrackerState after every applied intent
    state_changed = Signal(object)

    def __init__(
        self,
        state: Optional[TrackerState] = None,
        service: Optional[TrackerService] = None,
        parent=None,
    ):
        """
        Initialize the store.

        Args:
            state: Initial state (defaults to the seed expenses)
            service: Tracker service used to apply intents
            parent: Parent QObject
        """
        super().__init__(parent)
        self._state = state if state is not None else seed_state()
        self._service = service or TrackerService()

    @property
    def state(self) -> TrackerState:
        return self._state

    def dispatch(self, intent: Intent) -> UpdateResult:
        """
        Apply an intent and publish the new state.

        Rejected submissions leave the state as it was and emit nothing.

        Args:
            intent: User intent

        Returns:
            UpdateResult from the service
        """
        result = self._service.apply(self._state, intent)
        if not result.applied:
            logger.debug("Ignored %s: %s", intent.intent_type, result.reason)
            return result

        logger.debug("Applied %s", intent.intent_type)
        self._state = result.state
        self.state_changed.emit(self._state)
        return result
