from . import analyzers, ping

__all__ = ["analyzers", "ping"]
