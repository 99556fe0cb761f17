"""Server events, their handlers and dispatch by priority."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from craftproto.text_component import TextComponent


class EventPriority(enum.Enum):
    MONITOR = "monitor"
    LOWEST = "lowest"
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    HIGHEST = "highest"


# Order in which handlers run: the monitor handlers see the final state.
_DISPATCH_ORDER = (
    EventPriority.LOWEST,
    EventPriority.LOW,
    EventPriority.NORMAL,
    EventPriority.HIGH,
    EventPriority.HIGHEST,
    EventPriority.MONITOR,
)


class EventResult(enum.Enum):
    DENY = "deny"
    DEFAULT = "default"
    ALLOW = "allow"


@dataclass(frozen=True)
class EventHandler:
    """A function run for an event at a given priority."""

    func: Callable[[Any], EventResult | None]
    priority: EventPriority = EventPriority.NORMAL


class HandlerList:
    """Handlers for one event type, grouped by priority."""

    def __init__(self) -> None:
        self._handlers: dict[EventPriority, list[EventHandler]] = {
            priority: [] for priority in EventPriority
        }

    def get_handlers(self, priority: EventPriority) -> list[EventHandler]:
        return list(self._handlers[priority])

    def register(self, handler: EventHandler) -> None:
        """Add a handler unless an equal one is already registered."""
        handlers = self._handlers[handler.priority]
        if handler not in handlers:
            handlers.append(handler)

    def unregister_all(self) -> None:
        for handlers in self._handlers.values():
            handlers.clear()

    def __iter__(self):
        for priority in _DISPATCH_ORDER:
            yield from self._handlers[priority]


class EventManager:
    """Keeps a handler list for each event type."""

    def __init__(self) -> None:
        self._lists: dict[type, HandlerList] = {}

    def register_event_handler(self, event_type: type, handler: EventHandler) -> None:
        self._lists.setdefault(event_type, HandlerList()).register(handler)

    def handlers_for(self, event_type: type) -> HandlerList | None:
        return self._lists.get(event_type)


def listen(manager: EventManager, event: Any) -> EventResult:
    """Run every handler for the event's type in priority order.

    The result is that of the last handler which allowed or denied the event,
    or ``DEFAULT`` when none did.
    """
    handlers = manager.handlers_for(type(event))
    result = EventResult.DEFAULT
    if handlers is None:
        return result
    for handler in handlers:
        outcome = handler.func(event)
        if outcome in (EventResult.DENY, EventResult.ALLOW):
            result = outcome
    return result


@dataclass
class EventOnEnable:
    """Raised when the server enables its plugins."""


@dataclass
class EventOnDisable:
    """Raised when the server disables its plugins."""


class LoginResultKind(enum.Enum):
    ALLOWED = "allowed"
    KICK_BANNED = "kick_banned"
    KICK_FULL = "kick_full"
    KICK_OTHER = "kick_other"
    KICK_WHITELIST = "kick_whitelist"


@dataclass
class PlayerLoginResult:
    """Whether a login is allowed and, if not, the message shown."""

    kind: LoginResultKind = LoginResultKind.ALLOWED
    message: TextComponent | None = None

    @classmethod
    def default_ban_message(cls) -> TextComponent:
        return TextComponent.builder().text("The Ban Hammer has spoken!").build()

    @classmethod
    def default_kick_full_message(cls) -> TextComponent:
        return TextComponent.builder().text("Server is full!").build()

    @classmethod
    def default_kick_whitelist_message(cls) -> TextComponent:
        return TextComponent.builder().text("You are not white-listed on this server").build()

    @classmethod
    def default_kick_message(cls) -> TextComponent:
        return TextComponent.builder().text("Kicked by an operator").build()


@dataclass
class EventPlayerLogin:
    """Raised when a player logs in; handlers may refuse the login."""

    player: Any
    hostname: str
    port: int
    address: tuple[str, int]
    real_address: tuple[str, int]
    result: PlayerLoginResult = field(default_factory=PlayerLoginResult)

    def disallow(self, result: PlayerLoginResult) -> None:
        self.result = result