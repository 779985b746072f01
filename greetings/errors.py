"""Error taxonomy for value construction, roster fetching and delivery.

- Validation errors are raised when a value is built, never during dispatch.
- `SourceUnavailable` aborts a whole pass.
- `NoApplicableChannel` and `DeliveryError` are per-item: the engine stores
  them in the batch result instead of raising them.
"""

from __future__ import annotations


class GreetingsError(Exception):
    """Base class for every error raised by the greetings package."""


class ValidationError(GreetingsError, ValueError):
    """A raw value does not satisfy the rules of its domain type."""


class EmptyValue(ValidationError):
    pass


class InvalidFormat(ValidationError):
    pass


class FutureDate(ValidationError):
    pass


class SourceUnavailable(GreetingsError):
    """The employee roster could not be fetched."""

    def __init__(self, cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(f"employee source unavailable: {cause}")


class NoApplicableChannel(GreetingsError):
    """No configured handler accepts the addressee's channel."""

    def __init__(self, channel: str) -> None:
        self.channel = channel
        super().__init__(f"no handler configured for channel {channel!r}")


class DeliveryError(GreetingsError):
    """A handler could not deliver an envelope."""


class TransportFailure(DeliveryError):
    def __init__(self, cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(f"transport failure: {cause}")


class WrongChannel(DeliveryError):
    """`send` was called with an envelope the handler cannot address."""

    def __init__(self, handler_channel: str, address_channel: str) -> None:
        self.handler_channel = handler_channel
        self.address_channel = address_channel
        super().__init__(
            f"{handler_channel} handler cannot deliver to a {address_channel} address"
        )


class SelectionFailure(DeliveryError):
    """A handler raised while the engine was choosing a channel."""

    def __init__(self, cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(f"channel selection failed: {cause}")
