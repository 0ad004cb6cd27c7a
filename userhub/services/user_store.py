"""In-memory holder for the most recent aggregation output."""

from __future__ import annotations

import threading
from typing import Iterable, Optional, Tuple

from userhub.schemas.normalized import AdaptationError, AggregationResult, UnifiedUser


class UserStore:
    """Single-writer cell exposing the published users as an immutable tuple.

    Reads return the same tuple instance until the next ``publish``, so
    consumers can detect changes with an identity check.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._users: Tuple[UnifiedUser, ...] = ()
        self._errors: Tuple[AdaptationError, ...] = ()
        self._last_result: Optional[AggregationResult] = None

    @property
    def all_users(self) -> Tuple[UnifiedUser, ...]:
        return self._users

    @property
    def errors(self) -> Tuple[AdaptationError, ...]:
        return self._errors

    @property
    def last_result(self) -> Optional[AggregationResult]:
        return self._last_result

    def publish(
        self,
        users: Iterable[UnifiedUser],
        errors: Iterable[AdaptationError],
        result: Optional[AggregationResult] = None,
    ) -> None:
        """Replace the published users and errors in one step."""
        users = tuple(users)
        errors = tuple(errors)
        with self._lock:
            self._users = users
            self._errors = errors
            self._last_result = result

    def reset(self) -> None:
        self.publish((), ())
