from __future__ import annotations

from dataclasses import dataclass, field, replace

from src.app.ports.output import ITransitCatalogRepository
from src.domain.exceptions import AlertNotFound
from src.domain.models.catalog import Alert

COLLAPSED_ALERT_COUNT = 3


@dataclass(slots=True)
class AlertService:
    """In-memory alert inbox, seeded from the catalog and lost on restart."""

    repository: ITransitCatalogRepository
    _alerts: list[Alert] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self._alerts = list(self.repository.initial_alerts())

    def list(self, *, expanded: bool = False) -> tuple[Alert, ...]:
        alerts = self._alerts if expanded else self._alerts[:COLLAPSED_ALERT_COUNT]
        return tuple(alerts)

    @property
    def unread_count(self) -> int:
        return sum(1 for a in self._alerts if not a.read)

    def _index(self, alert_id: str) -> int:
        for i, a in enumerate(self._alerts):
            if a.alert_id == alert_id:
                return i
        raise AlertNotFound(alert_id)

    def mark_read(self, alert_id: str) -> Alert:
        i = self._index(alert_id)
        self._alerts[i] = replace(self._alerts[i], read=True)
        return self._alerts[i]

    def mark_all_read(self) -> int:
        """Mark every alert read; return how many were unread."""

        changed = self.unread_count
        self._alerts = [replace(a, read=True) for a in self._alerts]
        return changed

    def dismiss(self, alert_id: str) -> None:
        remaining = [a for a in self._alerts if a.alert_id != alert_id]
        if len(remaining) == len(self._alerts):
            raise AlertNotFound(alert_id)
        self._alerts = remaining
