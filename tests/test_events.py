import pytest

from craftproto.events import (
    EventHandler,
    EventManager,
    EventOnDisable,
    EventOnEnable,
    EventPlayerLogin,
    EventPriority,
    EventResult,
    HandlerList,
    LoginResultKind,
    PlayerLoginResult,
    listen,
)


def _recorder(log, name, result=EventResult.DEFAULT):
    def handler(event):
        log.append(name)
        return result

    return handler


def test_listen_without_handlers_is_default():
    assert listen(EventManager(), EventOnEnable()) is EventResult.DEFAULT


def test_handlers_run_in_priority_order():
    log = []
    manager = EventManager()
    for priority in EventPriority:
        manager.register_event_handler(
            EventOnEnable, EventHandler(_recorder(log, priority.value), priority)
        )
    listen(manager, EventOnEnable())
    assert log == ["lowest", "low", "normal", "high", "highest", "monitor"]


def test_last_decision_wins():
    log = []
    manager = EventManager()
    manager.register_event_handler(
        EventOnEnable, EventHandler(_recorder(log, "a", EventResult.DENY), EventPriority.LOW)
    )
    manager.register_event_handler(
        EventOnEnable, EventHandler(_recorder(log, "b", EventResult.ALLOW), EventPriority.HIGH)
    )
    manager.register_event_handler(
        EventOnEnable, EventHandler(_recorder(log, "c"), EventPriority.MONITOR)
    )
    assert listen(manager, EventOnEnable()) is EventResult.ALLOW


def test_deny_persists_through_default_handlers():
    manager = EventManager()
    manager.register_event_handler(
        EventOnDisable, EventHandler(lambda e: EventResult.DENY, EventPriority.LOWEST)
    )
    manager.register_event_handler(EventOnDisable, EventHandler(lambda e: EventResult.DEFAULT))
    assert listen(manager, EventOnDisable()) is EventResult.DENY


def test_events_are_dispatched_by_type():
    log = []
    manager = EventManager()
    manager.register_event_handler(EventOnEnable, EventHandler(_recorder(log, "enable")))
    listen(manager, EventOnDisable())
    assert log == []
    listen(manager, EventOnEnable())
    assert log == ["enable"]


def test_duplicate_handler_registered_once():
    log = []
    func = _recorder(log, "x", EventResult.ALLOW)
    manager = EventManager()
    manager.register_event_handler(EventOnEnable, EventHandler(func))
    manager.register_event_handler(EventOnEnable, EventHandler(func))
    assert len(manager.handlers_for(EventOnEnable).get_handlers(EventPriority.NORMAL)) == 1
    assert listen(manager, EventOnEnable()) is EventResult.ALLOW
    assert log == ["x"]


def test_handler_list_get_and_unregister():
    handlers = HandlerList()
    handler = EventHandler(lambda e: EventResult.DEFAULT, EventPriority.HIGH)
    handlers.register(handler)
    assert handlers.get_handlers(EventPriority.HIGH) == [handler]
    assert handlers.get_handlers(EventPriority.LOW) == []
    handlers.unregister_all()
    assert handlers.get_handlers(EventPriority.HIGH) == []


def test_handlers_for_returns_registered_list():
    manager = EventManager()
    assert manager.handlers_for(EventOnEnable) is None
    handler = EventHandler(lambda e: EventResult.DEFAULT)
    manager.register_event_handler(EventOnEnable, handler)
    assert manager.handlers_for(EventOnEnable).get_handlers(EventPriority.NORMAL) == [handler]


def test_default_priority_is_normal():
    handler = EventHandler(lambda e: EventResult.DEFAULT)
    assert handler.priority is EventPriority.NORMAL


def test_handler_can_disallow_login():
    event = EventPlayerLogin(
        player=None,
        hostname="localhost",
        port=25565,
        address=("127.0.0.1", 50000),
        real_address=("127.0.0.1", 50000),
    )
    assert event.result.kind is LoginResultKind.ALLOWED

    def ban(e):
        e.disallow(
            PlayerLoginResult(LoginResultKind.KICK_BANNED, PlayerLoginResult.default_ban_message())
        )
        return EventResult.DENY

    manager = EventManager()
    manager.register_event_handler(EventPlayerLogin, EventHandler(ban))
    assert listen(manager, event) is EventResult.DENY
    assert event.result.kind is LoginResultKind.KICK_BANNED
    assert event.result.message.text == "The Ban Hammer has spoken!"


@pytest.mark.parametrize(
    "factory, text",
    [
        (PlayerLoginResult.default_ban_message, "The Ban Hammer has spoken!"),
        (PlayerLoginResult.default_kick_full_message, "Server is full!"),
        (
            PlayerLoginResult.default_kick_whitelist_message,
            "You are not white-listed on this server",
        ),
        (PlayerLoginResult.default_kick_message, "Kicked by an operator"),
    ],
)
def test_default_messages(factory, text):
    assert factory().to_dict() == {"text": text}