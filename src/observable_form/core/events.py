"""Synchronous publish/subscribe used by controls and forms.

A ChangeSignal holds an ordered list of subscriber callbacks and calls each
one in subscription order when an event is emitted. Dispatch happens on the
calling thread and completes before emit() returns.

Usage:
    signal: ChangeSignal[str] = ChangeSignal("greeting")
    subscription = signal.subscribe(print)
    signal.emit("hello")  # prints "hello"
    subscription.cancel()
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType
from typing import Generic, TypeVar

from observable_form.core.errors import FormConfigurationError

logger = logging.getLogger(__name__)

E = TypeVar("E")

Handler = Callable[[E], None]


class Subscription(Generic[E]):
    """Handle returned by ChangeSignal.subscribe().

    Cancelling detaches the callback. Usable as a context manager so a
    subscription can be scoped to a block:

        with control.subscribe(on_change):
            control.value = "x"
    """

    def __init__(self, signal: ChangeSignal[E], callback: Handler[E]) -> None:
        self._signal = signal
        self.callback = callback

    @property
    def active(self) -> bool:
        """True while the callback is still attached."""
        return self._signal._contains(self)

    def cancel(self) -> None:
        """Detach the callback. Calling twice is a no-op."""
        self._signal._remove(self)

    def __enter__(self) -> Subscription[E]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cancel()


class ChangeSignal(Generic[E]):
    """Ordered, synchronous event channel.

    Subscribers added or removed while an event is being dispatched take
    effect from the next emit(). Exceptions raised by a subscriber propagate
    to the emitter; remaining subscribers are not called for that event.
    Not thread-safe: callers mutating from several threads must synchronize
    externally.
    """

    def __init__(self, source_name: str = "") -> None:
        self._source_name = source_name
        self._subscriptions: list[Subscription[E]] = []

    def subscribe(self, callback: Handler[E]) -> Subscription[E]:
        """Attach a callback.

        Args:
            callback: Called with each emitted event.

        Returns:
            Subscription handle for detaching the callback.

        Raises:
            FormConfigurationError: If callback is not callable.
        """
        if not callable(callback):
            raise FormConfigurationError(
                f"Subscriber for {self._source_name or 'signal'} must be callable, "
                f"got {type(callback).__name__}",
                {"source": self._source_name},
            )
        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        return subscription

    def unsubscribe(self, callback: Handler[E]) -> bool:
        """Detach every subscription made with this callback.

        Returns:
            True if at least one subscription was removed.
        """
        before = len(self._subscriptions)
        self._subscriptions = [s for s in self._subscriptions if s.callback != callback]
        return len(self._subscriptions) != before

    def emit(self, event: E) -> None:
        """Deliver an event to every current subscriber, in order."""
        for subscription in tuple(self._subscriptions):
            subscription.callback(event)

    @property
    def source_name(self) -> str:
        """Name of the object emitting on this signal, used in messages."""
        return self._source_name

    @source_name.setter
    def source_name(self, name: str) -> None:
        self._source_name = name

    @property
    def subscriber_count(self) -> int:
        """Number of attached subscriptions."""
        return len(self._subscriptions)

    def clear(self) -> None:
        """Detach all subscribers."""
        if self._subscriptions:
            logger.debug(
                "Clearing %d subscriber(s) from %s",
                len(self._subscriptions),
                self._source_name or "signal",
            )
        self._subscriptions = []

    def _contains(self, subscription: Subscription[E]) -> bool:
        return any(s is subscription for s in self._subscriptions)

    def _remove(self, subscription: Subscription[E]) -> None:
        self._subscriptions = [s for s in self._subscriptions if s is not subscription]
