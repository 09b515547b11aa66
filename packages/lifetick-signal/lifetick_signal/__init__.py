"""lifetick-signal - In-process notification bus for lifetick."""
from __future__ import annotations

from lifetick_signal.bus import SignalBus
from lifetick_signal.systems import make_signal_system

__all__ = ["SignalBus", "make_signal_system"]
