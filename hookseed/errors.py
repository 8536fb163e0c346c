class HookseedError(Exception):
    """Base class for every error raised while generating or storing deliveries."""


class UnclassifiedEventError(HookseedError):
    """Event type does not match any taxonomy rule."""

    def __init__(self, event_type: str) -> None:
        super().__init__(f"Event type '{event_type}' does not belong to any object family.")
        self.event_type = event_type


class SerializationError(HookseedError):
    """Event envelope could not be serialized to JSON."""


class StorageError(HookseedError):
    """Bulk insert of a delivery batch failed."""
