# -*- coding: utf-8 -*-
"""
backend/app/modules/chat/routes/chat_routes.py

Chat del equipo por fase:
- GET    /chat/{stage_id}
- POST   /chat/{stage_id}
- PATCH  /chat/messages/{message_id}
- DELETE /chat/messages/{message_id}
- POST   /chat/messages/{message_id}/reactions

Autor: Atelier
Fecha: 12/08/2026
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.modules.auth.services import get_current_user
from app.modules.chat.facades import (
    ChatPermissionDenied,
    InvalidMessage,
    MessageNotFound,
    StageNotFound,
)
from app.modules.chat.routes.deps import get_chat_service
from app.modules.chat.schemas import (
    ChatMessageCreateIn,
    ChatMessageRead,
    ChatMessageUpdateIn,
    ReactionToggleIn,
    ReactionToggleResponse,
)
from app.modules.chat.services import ChatService

router = APIRouter(prefix="/chat", tags=["chat"])


@router.get("/{stage_id}", response_model=list[ChatMessageRead], summary="Mensajes de una fase")
async def list_messages(
    stage_id: str,
    user=Depends(get_current_user),
    svc: ChatService = Depends(get_chat_service),
):
    try:
        return await svc.list_messages(stage_id, viewer_id=user.id)
    except StageNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Fase no encontrada")


@router.post(
    "/{stage_id}",
    response_model=ChatMessageRead,
    status_code=status.HTTP_201_CREATED,
    summary="Publicar mensaje en una fase",
)
async def post_message(
    stage_id: str,
    payload: ChatMessageCreateIn,
    user=Depends(get_current_user),
    svc: ChatService = Depends(get_chat_service),
):
    try:
        return await svc.post_message(
            stage_id,
            author=user,
            content=payload.content,
            mentions=payload.mentions,
            attachments=[a.model_dump(exclude_none=True) for a in payload.attachments],
            parent_message_id=payload.parent_message_id,
            notify_assignee=payload.notify_assignee,
        )
    except StageNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Fase no encontrada")
    except InvalidMessage as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.patch("/messages/{message_id}", response_model=ChatMessageRead, summary="Editar mensaje")
async def edit_message(
    message_id: str,
    payload: ChatMessageUpdateIn,
    user=Depends(get_current_user),
    svc: ChatService = Depends(get_chat_service),
):
    try:
        return await svc.edit_message(message_id, actor=user, content=payload.content)
    except MessageNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Mensaje no encontrado")
    except InvalidMessage as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ChatPermissionDenied as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))


@router.delete("/messages/{message_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Borrar mensaje")
async def delete_message(
    message_id: str,
    user=Depends(get_current_user),
    svc: ChatService = Depends(get_chat_service),
):
    try:
        await svc.delete_message(message_id, actor=user)
    except MessageNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Mensaje no encontrado")
    except ChatPermissionDenied as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))


@router.post(
    "/messages/{message_id}/reactions",
    response_model=ReactionToggleResponse,
    summary="Agregar o quitar reacción",
)
async def toggle_reaction(
    message_id: str,
    payload: ReactionToggleIn,
    user=Depends(get_current_user),
    svc: ChatService = Depends(get_chat_service),
):
    try:
        return await svc.toggle_reaction(message_id, actor=user, emoji=payload.emoji)
    except MessageNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Mensaje no encontrado")

# Fin del archivo backend/app/modules/chat/routes/chat_routes.py
