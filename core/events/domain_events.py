"""Change notifications for catalog aggregates, emitted after successful writes."""
from core.events.signal import Signal


class DomainEvents:
    def __init__(self) -> None:
        self.category_changed: Signal[str] = Signal()  # category_id
        self.genre_changed: Signal[str] = Signal()     # genre_id


# SINGLE global instance
domain_events = DomainEvents()
