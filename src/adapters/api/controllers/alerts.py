from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from src.adapters.api.dependencies import get_alert_service
from src.adapters.api.schemas.catalog import AlertSchema, AlertsResponseSchema
from src.app.services.alert_service import AlertService
from src.domain.exceptions import AlertNotFound
from src.domain.models.catalog import Alert

router = APIRouter(prefix="/alerts", tags=["alerts"])


def _alert_to_schema(a: Alert) -> AlertSchema:
    return AlertSchema(
        alert_id=a.alert_id,
        type=a.type.value,
        title=a.title,
        message=a.message,
        minutes_ago=a.minutes_ago,
        route=a.route,
        read=a.read,
    )


def _inbox(service: AlertService, *, expanded: bool) -> AlertsResponseSchema:
    return AlertsResponseSchema(
        unread_count=service.unread_count,
        alerts=[_alert_to_schema(a) for a in service.list(expanded=expanded)],
    )


@router.get("", response_model=AlertsResponseSchema)
async def list_alerts(
    expanded: bool = Query(default=False),
    service: AlertService = Depends(get_alert_service),
) -> AlertsResponseSchema:
    return _inbox(service, expanded=expanded)


@router.post("/read-all", response_model=AlertsResponseSchema)
async def mark_all_read(
    service: AlertService = Depends(get_alert_service),
) -> AlertsResponseSchema:
    service.mark_all_read()
    return _inbox(service, expanded=True)


@router.post("/{alert_id}/read", response_model=AlertSchema)
async def mark_read(
    alert_id: str,
    service: AlertService = Depends(get_alert_service),
) -> AlertSchema:
    try:
        return _alert_to_schema(service.mark_read(alert_id))
    except AlertNotFound:
        raise HTTPException(status_code=404, detail="Alert not found")


@router.delete("/{alert_id}", status_code=204)
async def dismiss(
    alert_id: str,
    service: AlertService = Depends(get_alert_service),
) -> None:
    try:
        service.dismiss(alert_id)
    except AlertNotFound:
        raise HTTPException(status_code=404, detail="Alert not found")
