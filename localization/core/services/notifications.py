# localization/core/services/notifications.py
from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar

import structlog

from localization.core.domain.events import (
    CancellableEventArgs,
    DeleteEventArgs,
    SaveEventArgs,
)

logger = structlog.get_logger()

ArgsT = TypeVar("ArgsT", bound=CancellableEventArgs)

# handler(sender, args): `sender` is the entity being saved or deleted.
Handler = Callable[[Any, ArgsT], None]


class EventHook(Generic[ArgsT]):
    """
    An ordered list of handlers for one notification.

    Handlers run synchronously in registration order on the caller's thread.
    An exception raised by a handler propagates out of `fire` and stops the
    remaining handlers.
    """

    def __init__(self, name: str, handlers: Optional[Iterable[Handler]] = None) -> None:
        self.name = name
        self._handlers: List[Handler] = list(handlers or [])

    def subscribe(self, handler: Handler) -> Handler:
        """
        Register `handler`. Returns it unchanged so this can be used as a
        decorator:

            @service.events.saving.subscribe
            def veto(sender, args):
                ...
        """
        self._handlers.append(handler)
        return handler

    def unsubscribe(self, handler: Handler) -> None:
        """Remove `handler`. Unknown handlers are ignored."""
        try:
            self._handlers.remove(handler)
        except ValueError:
            logger.debug("event_handler_not_registered", hook=self.name)

    def clear(self) -> None:
        self._handlers.clear()

    def fire(self, sender: Any, args: ArgsT) -> ArgsT:
        for handler in list(self._handlers):
            handler(sender, args)
        return args

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"<EventHook {self.name} handlers={len(self._handlers)}>"


class LocalizationEvents:
    """
    The four notifications raised by a LocalizationService.

    Each service owns its own instance unless one is passed in explicitly;
    pass the same instance to several services to make them share handlers.
    """

    def __init__(self) -> None:
        self.saving: EventHook[SaveEventArgs] = EventHook("saving")
        self.saved: EventHook[SaveEventArgs] = EventHook("saved")
        self.deleting: EventHook[DeleteEventArgs] = EventHook("deleting")
        self.deleted: EventHook[DeleteEventArgs] = EventHook("deleted")

    def clear(self) -> None:
        for hook in (self.saving, self.saved, self.deleting, self.deleted):
            hook.clear()
