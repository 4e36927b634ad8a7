# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/routes/notification_routes.py

Bandeja del usuario actual:
- GET    /notifications                (unread_only, limit, offset)
- PATCH  /notifications/{id}/read
- POST   /notifications/read-all
- DELETE /notifications/{id}

Autor: Atelier
Fecha: 12/08/2026
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.modules.auth.services import get_current_user
from app.modules.notifications.facades import NotificationNotFound
from app.modules.notifications.routes.deps import get_notification_service
from app.modules.notifications.schemas import MarkAllReadResponse, NotificationListResponse, NotificationRead
from app.modules.notifications.services import NotificationService

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=NotificationListResponse, summary="Mis notificaciones")
async def list_notifications(
    unread_only: bool = Query(default=False),
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    user=Depends(get_current_user),
    svc: NotificationService = Depends(get_notification_service),
):
    items, unread = await svc.list_for_user(user.id, unread_only=unread_only, limit=limit, offset=offset)
    return NotificationListResponse(items=items, unread_count=unread)


@router.patch("/{notification_id}/read", response_model=NotificationRead, summary="Marcar como leída")
async def mark_read(
    notification_id: str,
    user=Depends(get_current_user),
    svc: NotificationService = Depends(get_notification_service),
):
    try:
        return await svc.mark_read(user.id, notification_id)
    except NotificationNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notificación no encontrada")


@router.post("/read-all", response_model=MarkAllReadResponse, summary="Marcar todas como leídas")
async def mark_all_read(
    user=Depends(get_current_user),
    svc: NotificationService = Depends(get_notification_service),
):
    return MarkAllReadResponse(updated=await svc.mark_all_read(user.id))


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Eliminar notificación")
async def delete_notification(
    notification_id: str,
    user=Depends(get_current_user),
    svc: NotificationService = Depends(get_notification_service),
):
    try:
        await svc.delete(user.id, notification_id)
    except NotificationNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notificación no encontrada")

# Fin del archivo backend/app/modules/notifications/routes/notification_routes.py
