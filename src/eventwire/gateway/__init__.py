"""Gateway: reference bus implementation."""

from eventwire.gateway.bus import Bus, BusLike, Registry

__all__ = ["Bus", "BusLike", "Registry"]
