from opening_notifier.models.store import Store

__all__ = ["Store"]
