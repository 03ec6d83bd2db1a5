"""Errors raised while handling protocol messages."""


class MalformedParamsError(ValueError):
    """The params of a message do not match the shape its method expects."""

    def __init__(self, method: str, reason: str) -> None:
        super().__init__(f"Malformed params for {method}: {reason}")
        self.method = method
        self.reason = reason
