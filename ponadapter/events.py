"""Event callbacks raised by the lower layer and the system control operations."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Mapping, Sequence

from .errors import PonAdapterErrno, PonAdapterError


class Event(Enum):
    """Events a lower layer can report to its user."""

    ALARM = "alarm"
    OPTIC_ALARM = "optic_alarm"
    OMCI_MSG = "omci_msg"
    PLOAM_STATE = "ploam_state"
    INTERVAL_END = "interval_end"
    LINK_STATE = "link_state"
    NET_STATE = "net_state"
    LINK_INIT = "link_init"
    LOOP_DETECT = "loop_detect"
    ONU_RND_CHL_TBL = "onu_rnd_chl_tbl"
    AUTH_RESULT_RDY = "auth_result_rdy"
    AUTH_STATUS_CHG = "auth_status_chg"
    OMCI_IK_UPDATE = "omci_ik_update"
    MIB_RESET = "mib_reset"
    EPON_LINK = "epon_link"
    EPON_STATE = "epon_state"
    CH_PARTITION_INDEX_RESET = "ch_partition_index_reset"
    TWDM_CH_PROFILE_UPDATE = "twdm_ch_profile_update"
    PON_ALARM = "pon_alarm"

    @property
    def params(self) -> tuple[str, ...]:
        """Names of the arguments passed after the caller context."""
        return _PARAMS[self]


_PARAMS: dict[Event, tuple[str, ...]] = {
    Event.ALARM: ("class_id", "instance_id", "alarm", "active"),
    Event.OPTIC_ALARM: ("alarm", "active"),
    Event.OMCI_MSG: ("msg",),
    Event.PLOAM_STATE: ("prev_state", "curr_state"),
    Event.INTERVAL_END: ("interval_end_time",),
    Event.LINK_STATE: ("instance_id", "state", "config_ind"),
    Event.NET_STATE: ("iface_name", "iface_up"),
    Event.LINK_INIT: ("instance_id", "is_initialized"),
    Event.LOOP_DETECT: ("instance_id",),
    Event.ONU_RND_CHL_TBL: ("onu_rnd_chl_tbl",),
    Event.AUTH_RESULT_RDY: ("onu_auth_result",),
    Event.AUTH_STATUS_CHG: ("status",),
    Event.OMCI_IK_UPDATE: ("omci_ik",),
    Event.MIB_RESET: (),
    Event.EPON_LINK: ("link_index", "llid", "status", "status_prev"),
    Event.EPON_STATE: ("prev_counter", "state_act", "state_prev"),
    Event.CH_PARTITION_INDEX_RESET: (),
    Event.TWDM_CH_PROFILE_UPDATE: ("is_active", "ch_index"),
    Event.PON_ALARM: ("alarm_id", "alarm_status"),
}

Handler = Callable[..., Any]


class EventHandlers:
    """A set of event callbacks sharing one caller context.

    Each handler is called as ``handler(caller, *args)``; events without a
    handler are ignored.
    """

    def __init__(
        self,
        caller: Any = None,
        handlers: Mapping[Event | str, Handler | None] | None = None,
        **named: Handler | None,
    ) -> None:
        self.caller = caller
        self._handlers: dict[Event, Handler] = {}
        for source in (handlers or {}, named):
            for key, handler in source.items():
                if handler is None:
                    continue
                if not callable(handler):
                    raise TypeError(f"handler for {key!r} is not callable")
                self._handlers[Event(key)] = handler

    def handles(self, event: Event | str) -> bool:
        """Whether a handler is registered for ``event``."""
        return Event(event) in self._handlers

    def emit(self, event: Event | str, *args: Any) -> bool:
        """Call the handler for ``event``; return False if there is none."""
        event = Event(event)
        if len(args) != len(event.params):
            raise TypeError(
                f"{event.value} takes {len(event.params)} arguments "
                f"({', '.join(event.params)}), got {len(args)}"
            )
        handler = self._handlers.get(event)
        if handler is None:
            return False
        handler(self.caller, *args)
        return True


class SystemOps:
    """Lifecycle of a lower layer: init once, start once, then reboot or shutdown.

    The device-specific work of each step is supplied either as callables
    given to the constructor (``on_init(init_data, config, event_handler)``,
    ``on_start()``, ``on_reboot(timeout_ms)``, ``on_shutdown()``) or by a
    subclass overriding ``_on_init``, ``_on_start``, ``_on_reboot`` and
    ``_on_shutdown``. The configuration and event handlers handed to ``init``
    are kept until reboot or shutdown.
    """

    def __init__(
        self,
        on_init: Callable[[tuple[str, ...], Any, EventHandlers | None], Any] | None = None,
        on_start: Callable[[], Any] | None = None,
        on_reboot: Callable[[int], Any] | None = None,
        on_shutdown: Callable[[], Any] | None = None,
    ) -> None:
        for name, fn in (
            ("on_init", on_init),
            ("on_start", on_start),
            ("on_reboot", on_reboot),
            ("on_shutdown", on_shutdown),
        ):
            if fn is not None and not callable(fn):
                raise TypeError(f"{name} is not callable")
        self._init_fn = on_init
        self._start_fn = on_start
        self._reboot_fn = on_reboot
        self._shutdown_fn = on_shutdown
        self.init_data: tuple[str, ...] = ()
        self.config: Any = None
        self.event_handler: EventHandlers | None = None
        self.initialized = False
        self.started = False

    def init(
        self,
        init_data: Sequence[str] | None,
        config: Any,
        event_handler: EventHandlers | None,
    ) -> None:
        """Initialise the device; allowed once until the next reboot or shutdown."""
        if self.initialized:
            raise PonAdapterError(PonAdapterErrno.ERR_RESOURCE_EXISTS, "already initialized")
        self.init_data = tuple(init_data or ())
        self.config = config
        self.event_handler = event_handler
        try:
            self._on_init()
        except BaseException:
            self._release()
            raise
        self.initialized = True

    def start(self) -> None:
        """Enable events and interrupts; allowed once after init."""
        self._require_init()
        if self.started:
            raise PonAdapterError(PonAdapterErrno.ERR_RESOURCE_EXISTS, "already started")
        self._on_start()
        self.started = True

    def reboot(self, timeout_ms: int) -> None:
        """Reboot the device after ``timeout_ms`` milliseconds."""
        self._require_init()
        if timeout_ms < 0:
            raise PonAdapterError(PonAdapterErrno.ERR_INVALID_VAL, "negative reboot timeout")
        self._on_reboot(timeout_ms)
        self._release()

    def shutdown(self) -> None:
        """Terminate the device."""
        self._require_init()
        self._on_shutdown()
        self._release()

    def _require_init(self) -> None:
        if not self.initialized:
            raise PonAdapterError(PonAdapterErrno.ERR_NOT_AVAIL, "not initialized")

    def _release(self) -> None:
        self.init_data = ()
        self.config = None
        self.event_handler = None
        self.initialized = False
        self.started = False

    def _on_init(self) -> None:
        if self._init_fn is not None:
            self._init_fn(self.init_data, self.config, self.event_handler)

    def _on_start(self) -> None:
        if self._start_fn is not None:
            self._start_fn()

    def _on_reboot(self, timeout_ms: int) -> None:
        if self._reboot_fn is not None:
            self._reboot_fn(timeout_ms)

    def _on_shutdown(self) -> None:
        if self._shutdown_fn is not None:
            self._shutdown_fn()