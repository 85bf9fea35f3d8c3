"""Kernel time – clock port and implementations."""
from teamsync.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
