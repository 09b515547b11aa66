"""System factories for signal dispatch."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from lifetick_signal.bus import SignalBus

if TYPE_CHECKING:
    from lifetick import TickContext


def make_signal_system(bus: SignalBus) -> Callable[[TickContext], None]:
    """Return a system that delivers everything published so far this frame.

    Register it after the systems that publish.
    """

    def signal_system(ctx: TickContext) -> None:
        bus.flush()

    return signal_system
