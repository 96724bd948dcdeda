"""
Inbound rate limiting: sliding window of request timestamps per client.
"""

import time
from dataclasses import dataclass, field
from threading import Lock
from typing import Optional


@dataclass
class RateLimitConfig:
    max_requests: int = 100
    window_seconds: float = 15 * 60


@dataclass
class RateLimitState:
    requests: list[float] = field(default_factory=list)


class RateLimiter:
    def __init__(self, config: Optional[RateLimitConfig] = None, clock=time.monotonic):
        self.config = config or RateLimitConfig()
        self._states: dict[str, RateLimitState] = {}
        self._lock = Lock()
        self._clock = clock
        self._last_sweep = clock()

    def _cleanup_old_requests(self, state: RateLimitState, current_time: float):
        window = self.config.window_seconds
        state.requests = [ts for ts in state.requests if current_time - ts < window]

    def _sweep_expired_clients(self, current_time: float):
        """Forget clients with no request inside the window; runs at most once per window."""
        window = self.config.window_seconds
        if current_time - self._last_sweep < window:
            return
        self._last_sweep = current_time
        expired = [
            key
            for key, state in self._states.items()
            if not state.requests or current_time - state.requests[-1] >= window
        ]
        for key in expired:
            del self._states[key]

    def allow(self, client_key: str) -> bool:
        """Record a request for the client; False when its window is already full."""
        current_time = self._clock()
        with self._lock:
            self._sweep_expired_clients(current_time)
            state = self._states.setdefault(client_key, RateLimitState())
            self._cleanup_old_requests(state, current_time)
            if len(state.requests) >= self.config.max_requests:
                return False
            state.requests.append(current_time)
            return True

    def retry_after(self, client_key: str) -> float:
        """Seconds until the oldest request in the window expires."""
        with self._lock:
            state = self._states.get(client_key)
            if state is None or not state.requests:
                return 0.0
            oldest = state.requests[0]
        return max(0.0, self.config.window_seconds - (self._clock() - oldest))

    def tracked_clients(self) -> int:
        with self._lock:
            return len(self._states)
