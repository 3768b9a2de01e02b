import uuid
from typing import List

from fastapi import APIRouter, Depends, File, UploadFile

from lecturer_portal.client import PortalClient
from lecturer_portal.repositories.assignments import AssignmentRepository
from lecturer_portal.schemas.assignment import (
    AssignmentCreate,
    AssignmentOut,
    AssignmentUpdate,
    AttachmentResultOut,
    PortalToggleIn,
)
from lecturer_portal.schemas.common import DeletedOut
from lecturer_portal.storage import BlobStore, get_blob_store
from lecturer_portal.utils.auth import get_client, get_current_identity

router = APIRouter(prefix="/assignments", tags=["Assignments"])


@router.get("", response_model=list[AssignmentOut])
def list_assignments(client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    return AssignmentRepository(client).list(me)


@router.post("", response_model=AssignmentOut, status_code=201)
def create_assignment(body: AssignmentCreate, client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    return AssignmentRepository(client).create(me, body)


@router.get("/{assignment_id}", response_model=AssignmentOut)
def get_assignment(assignment_id: uuid.UUID, client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    return AssignmentRepository(client).get(assignment_id)


@router.get("/{assignment_id}/files")
def get_assignment_files(
    assignment_id: uuid.UUID,
    client: PortalClient = Depends(get_client),
    me=Depends(get_current_identity),
    store: BlobStore = Depends(get_blob_store),
):
    repo = AssignmentRepository(client)
    return repo.file_urls(repo.get(assignment_id), store)


@router.put("/{assignment_id}", response_model=AssignmentOut)
def update_assignment(
    assignment_id: uuid.UUID,
    body: AssignmentUpdate,
    client: PortalClient = Depends(get_client),
    me=Depends(get_current_identity),
):
    return AssignmentRepository(client).update(assignment_id, body)


@router.patch("/{assignment_id}/portal", response_model=AssignmentOut)
def toggle_portal(
    assignment_id: uuid.UUID,
    body: PortalToggleIn,
    client: PortalClient = Depends(get_client),
    me=Depends(get_current_identity),
):
    return AssignmentRepository(client).set_portal_open(assignment_id, body.portal_open)


@router.post("/{assignment_id}/files", response_model=AttachmentResultOut)
async def upload_assignment_files(
    assignment_id: uuid.UUID,
    files: List[UploadFile] = File(...),
    client: PortalClient = Depends(get_client),
    me=Depends(get_current_identity),
    store: BlobStore = Depends(get_blob_store),
):
    payload = [(f.filename, await f.read()) for f in files]
    return AssignmentRepository(client).attach_files(assignment_id, payload, store)


@router.delete("/{assignment_id}", response_model=DeletedOut)
def delete_assignment(assignment_id: uuid.UUID, client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    AssignmentRepository(client).delete(assignment_id)
    return DeletedOut()
