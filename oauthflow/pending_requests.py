from __future__ import annotations

import threading
import time
import uuid

from oauthflow.constants import DEFAULT_STATE_TTL_SECONDS
from oauthflow.errors import StateReplayError, UnknownStateError
from oauthflow.models import PendingAuthorization


class PendingRequestStore:
    def __init__(
        self,
        *,
        ttl_seconds: float | None = DEFAULT_STATE_TTL_SECONDS,
        clock=time.time,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._requests: dict[str, PendingAuthorization] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._requests)

    def get(self, state: str) -> PendingAuthorization | None:
        with self._lock:
            return self._requests.get(state)

    def begin(self) -> str:
        with self._lock:
            self._evict_expired()
            state = str(uuid.uuid4())
            while state in self._requests:
                state = str(uuid.uuid4())

            self._requests[state] = PendingAuthorization(
                state=state,
                pending=True,
                created_at=self._clock(),
            )
            return state

    def consume(self, state: str) -> None:
        with self._lock:
            self._evict_expired()
            request = self._requests.get(state)
            if request is None:
                raise UnknownStateError()
            if not request.pending:
                raise StateReplayError()
            request.pending = False

    def _evict_expired(self) -> None:
        if self.ttl_seconds is None:
            return

        cutoff = self._clock() - self.ttl_seconds
        # Insertion order is creation order, so the oldest entries come first.
        expired_states = []
        for state, request in self._requests.items():
            if request.created_at >= cutoff:
                break
            expired_states.append(state)
        for state in expired_states:
            del self._requests[state]
