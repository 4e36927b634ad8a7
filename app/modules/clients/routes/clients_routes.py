# -*- coding: utf-8 -*-
"""
backend/app/modules/clients/routes/clients_routes.py

Rutas CRUD de clientes:
- POST   /clients
- GET    /clients?q=
- GET    /clients/{client_id}
- PATCH  /clients/{client_id}
- DELETE /clients/{client_id}   (400 si el cliente tiene proyectos)

Autor: Atelier
Fecha: 12/08/2026
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.modules.auth.services import get_current_user
from app.modules.clients.facades import ClientHasProjects, ClientNotFound
from app.modules.clients.routes.deps import get_clients_service
from app.modules.clients.schemas import ClientCreateIn, ClientRead, ClientUpdateIn
from app.modules.clients.services import ClientsService

router = APIRouter(prefix="/clients", tags=["clients"])


def _uid(u):
    """Extrae el id del usuario autenticado (objeto o dict)."""
    if isinstance(u, dict):
        return u.get("id")
    return getattr(u, "id", None)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cliente no encontrado")


@router.post("", response_model=ClientRead, status_code=status.HTTP_201_CREATED, summary="Crear cliente")
async def create_client(
    payload: ClientCreateIn,
    user=Depends(get_current_user),
    svc: ClientsService = Depends(get_clients_service),
):
    client = await svc.create_client(actor_id=_uid(user), **payload.model_dump())
    return ClientRead.model_validate(client)


@router.get("", response_model=List[ClientRead], summary="Listar clientes")
async def list_clients(
    q: Optional[str] = Query(default=None, max_length=255),
    user=Depends(get_current_user),
    svc: ClientsService = Depends(get_clients_service),
):
    return [ClientRead.model_validate(c) for c in await svc.list_clients(q)]


@router.get("/{client_id}", response_model=ClientRead, summary="Obtener cliente")
async def get_client(
    client_id: str,
    user=Depends(get_current_user),
    svc: ClientsService = Depends(get_clients_service),
):
    try:
        return ClientRead.model_validate(await svc.get_client(client_id))
    except ClientNotFound:
        raise _not_found()


@router.patch("/{client_id}", response_model=ClientRead, summary="Actualizar cliente")
async def update_client(
    client_id: str,
    payload: ClientUpdateIn,
    user=Depends(get_current_user),
    svc: ClientsService = Depends(get_clients_service),
):
    try:
        client = await svc.update_client(
            client_id, actor_id=_uid(user), **payload.model_dump(exclude_unset=True)
        )
    except ClientNotFound:
        raise _not_found()
    return ClientRead.model_validate(client)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Eliminar cliente")
async def delete_client(
    client_id: str,
    user=Depends(get_current_user),
    svc: ClientsService = Depends(get_clients_service),
):
    try:
        await svc.delete_client(client_id, actor_id=_uid(user))
    except ClientNotFound:
        raise _not_found()
    except ClientHasProjects as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

# Fin del archivo backend/app/modules/clients/routes/clients_routes.py
