import pytest

from ponadapter.errors import PonAdapterErrno, PonAdapterError
from ponadapter.events import Event, EventHandlers, SystemOps


def test_event_names_follow_callback_fields():
    assert Event("omci_msg") is Event.OMCI_MSG
    assert Event.PON_ALARM.value == "pon_alarm"
    assert len(Event) == 19


def test_event_params():
    assert Event("alarm").params == ("class_id", "instance_id", "alarm", "active")
    assert Event("mib_reset").params == ()
    assert Event("epon_state").params == ("prev_counter", "state_act", "state_prev")


def test_unknown_event_name():
    with pytest.raises(ValueError):
        Event("no_such_event")
    with pytest.raises(ValueError):
        EventHandlers(handlers={"no_such_event": print})


def test_emit_calls_handler_with_caller():
    seen = []
    handlers = EventHandlers(
        caller="ctx",
        alarm=lambda caller, *args: seen.append((caller, args)),
    )
    assert handlers.emit(Event.ALARM, 256, 1, 3, True) is True
    assert seen == [("ctx", (256, 1, 3, True))]


def test_emit_without_handler_returns_false():
    handlers = EventHandlers(caller=None)
    assert handlers.emit("mib_reset") is False
    assert not handlers.handles(Event.MIB_RESET)


def test_handles_accepts_mapping_and_names():
    handlers = EventHandlers(
        handlers={Event.LINK_STATE: lambda *a: None, "loop_detect": lambda *a: None},
        net_state=None,
    )
    assert handlers.handles("link_state")
    assert handlers.handles(Event.LOOP_DETECT)
    assert not handlers.handles(Event.NET_STATE)


def test_emit_checks_argument_count():
    handlers = EventHandlers(ploam_state=lambda *a: None)
    with pytest.raises(TypeError):
        handlers.emit(Event.PLOAM_STATE, 1)


def test_non_callable_handler_rejected():
    with pytest.raises(TypeError):
        EventHandlers(alarm=42)


class _RecordingSystem(SystemOps):
    def __init__(self):
        super().__init__()
        self.calls = []

    def _on_init(self):
        self.calls.append("init")

    def _on_start(self):
        self.calls.append("start")

    def _on_reboot(self, timeout_ms):
        self.calls.append(("reboot", timeout_ms))

    def _on_shutdown(self):
        self.calls.append("shutdown")


def test_system_lifecycle_order():
    system = _RecordingSystem()
    handlers = EventHandlers()
    system.init(["-v"], {"key": "value"}, handlers)
    assert system.init_data == ("-v",)
    assert system.event_handler is handlers
    system.start()
    system.reboot(500)
    assert system.calls == ["init", "start", ("reboot", 500)]
    assert system.config is None and not system.initialized


def test_init_twice_fails():
    system = SystemOps()
    system.init(None, None, None)
    with pytest.raises(PonAdapterError) as info:
        system.init(None, None, None)
    assert info.value.code == PonAdapterErrno.ERR_RESOURCE_EXISTS


def test_start_twice_fails():
    system = SystemOps()
    system.init(None, None, None)
    system.start()
    with pytest.raises(PonAdapterError) as info:
        system.start()
    assert info.value.code == PonAdapterErrno.ERR_RESOURCE_EXISTS


@pytest.mark.parametrize(
    "call",
    [lambda s: s.start(), lambda s: s.reboot(0), lambda s: s.shutdown()],
)
def test_operations_need_init(call):
    with pytest.raises(PonAdapterError) as info:
        call(SystemOps())
    assert info.value.code == PonAdapterErrno.ERR_NOT_AVAIL


def test_negative_reboot_timeout():
    system = SystemOps()
    system.init(None, None, None)
    with pytest.raises(PonAdapterError) as info:
        system.reboot(-1)
    assert info.value.code == PonAdapterErrno.ERR_INVALID_VAL
    assert system.initialized


def test_shutdown_allows_reinit():
    system = _RecordingSystem()
    system.init(None, None, None)
    system.shutdown()
    handlers = EventHandlers()
    system.init(None, None, handlers)
    assert system.calls == ["init", "shutdown", "init"]
    assert system.event_handler is handlers
    assert system.initialized and not system.started