from .virtual import PendingCall, VirtualClock

__all__ = ["PendingCall", "VirtualClock"]
