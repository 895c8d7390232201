"""The client's single state container."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import replace
from typing import Any

from app.client.actions import Reducer
from app.client.api_client import ApiClient, ApiError
from app.client.state import AppState

logger = logging.getLogger(__name__)

Listener = Callable[[AppState], None]
Action = Callable[..., Awaitable[Reducer]]


class StateStore:
    """Holds the current ``AppState`` and runs actions against the API.

    ``is_loading`` stays true while any dispatched action is in flight.
    Failed actions leave the collections as they were and set ``error``.
    Two concurrent updates of the same entity are applied in the order
    their responses arrive.
    """

    def __init__(self, api: ApiClient, initial: AppState | None = None):
        self._api = api
        self._state = initial or AppState()
        self._listeners: list[Listener] = []
        self._pending = 0

    @property
    def state(self) -> AppState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: AppState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    async def dispatch(self, action: Action, *args: Any) -> bool:
        """Run ``action(api, *args)`` and apply its reducer.

        Returns True on success, False when the API call failed.
        """
        self._pending += 1
        self._set_state(replace(self._state, is_loading=True, error=None))
        try:
            reducer = await action(self._api, *args)
        except ApiError as exc:
            logger.warning("%s failed: %s", getattr(action, "__name__", action), exc)
            next_state = replace(self._state, error=exc.message)
            succeeded = False
        except BaseException:
            self._pending -= 1
            self._set_state(replace(self._state, is_loading=self._pending > 0))
            raise
        else:
            next_state = reducer(self._state)
            succeeded = True

        self._pending -= 1
        self._set_state(replace(next_state, is_loading=self._pending > 0))
        return succeeded
