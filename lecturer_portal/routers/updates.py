import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query

from lecturer_portal.client import PortalClient
from lecturer_portal.repositories.updates import UpdateRepository
from lecturer_portal.schemas.common import DeletedOut
from lecturer_portal.schemas.update import UpdateCreate, UpdateOut, UpdatePatch
from lecturer_portal.utils.auth import get_client, get_current_identity

router = APIRouter(prefix="/updates", tags=["Updates"])


@router.get("", response_model=list[UpdateOut])
def list_updates(
    target_class: Optional[str] = Query(None, description="only updates reaching this class"),
    client: PortalClient = Depends(get_client),
    me=Depends(get_current_identity),
):
    repo = UpdateRepository(client)
    if target_class:
        return repo.list_for_class(me, target_class)
    return repo.list(me)


@router.post("", response_model=UpdateOut, status_code=201)
def post_update(body: UpdateCreate, client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    return UpdateRepository(client).create(me, body)


@router.put("/{update_id}", response_model=UpdateOut)
def edit_update(
    update_id: uuid.UUID,
    body: UpdatePatch,
    client: PortalClient = Depends(get_client),
    me=Depends(get_current_identity),
):
    return UpdateRepository(client).update(update_id, body)


@router.delete("/{update_id}", response_model=DeletedOut)
def delete_update(update_id: uuid.UUID, client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    UpdateRepository(client).delete(update_id)
    return DeletedOut()
