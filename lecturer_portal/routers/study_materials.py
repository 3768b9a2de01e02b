import uuid

from fastapi import APIRouter, Depends, File, UploadFile

from lecturer_portal.client import PortalClient
from lecturer_portal.repositories.study_materials import StudyMaterialRepository
from lecturer_portal.schemas.common import DeletedOut
from lecturer_portal.schemas.study_material import StudyMaterialCreate, StudyMaterialOut, StudyMaterialUpdate
from lecturer_portal.storage import BlobStore, get_blob_store
from lecturer_portal.utils.auth import get_client, get_current_identity

router = APIRouter(prefix="/study-materials", tags=["Study Materials"])


@router.get("", response_model=list[StudyMaterialOut])
def list_materials(client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    return StudyMaterialRepository(client).list(me)


@router.post("", response_model=StudyMaterialOut, status_code=201)
def create_material(body: StudyMaterialCreate, client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    return StudyMaterialRepository(client).create(me, body)


@router.put("/{material_id}", response_model=StudyMaterialOut)
def update_material(
    material_id: uuid.UUID,
    body: StudyMaterialUpdate,
    client: PortalClient = Depends(get_client),
    me=Depends(get_current_identity),
):
    return StudyMaterialRepository(client).update(material_id, body)


@router.post("/{material_id}/file", response_model=StudyMaterialOut)
async def upload_material_file(
    material_id: uuid.UUID,
    file: UploadFile = File(...),
    client: PortalClient = Depends(get_client),
    me=Depends(get_current_identity),
    store: BlobStore = Depends(get_blob_store),
):
    content = await file.read()
    return StudyMaterialRepository(client).attach_file(material_id, file.filename, content, store)


@router.delete("/{material_id}", response_model=DeletedOut)
def delete_material(material_id: uuid.UUID, client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    StudyMaterialRepository(client).delete(material_id)
    return DeletedOut()
