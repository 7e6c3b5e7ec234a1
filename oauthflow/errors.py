from __future__ import annotations


class ExchangeError(RuntimeError):
    code = "exchange_error"
    status_code = 502

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class InvalidInputError(ExchangeError):
    code = "invalid_request"
    status_code = 400


class UnknownStateError(ExchangeError):
    code = "unknown_state"
    status_code = 400

    def __init__(self, reason: str = "Unknown authorization request key") -> None:
        super().__init__(reason)


class StateReplayError(ExchangeError):
    code = "state_replay"
    status_code = 400

    def __init__(self, reason: str = "Authorization request key already used") -> None:
        super().__init__(reason)


class ExchangeRejectedError(ExchangeError):
    code = "exchange_rejected"
    status_code = 502

    def __init__(self, reason: str, *, upstream_status: int) -> None:
        super().__init__(reason)
        self.upstream_status = upstream_status


class TransportError(ExchangeError):
    code = "transport_error"

    def __init__(self, reason: str, *, timed_out: bool = False) -> None:
        super().__init__(reason)
        self.timed_out = timed_out
        self.status_code = 504 if timed_out else 502


class MalformedResponseError(ExchangeError):
    code = "malformed_response"
    status_code = 502
