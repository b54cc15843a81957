"""Per-Slave delivery tracking."""

from .tracker import DeliveryState, DeliveryTracker

__all__ = ["DeliveryState", "DeliveryTracker"]
