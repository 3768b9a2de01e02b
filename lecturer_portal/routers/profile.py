from fastapi import APIRouter, Depends, File, UploadFile

from lecturer_portal.client import PortalClient
from lecturer_portal.repositories.profiles import ProfileRepository
from lecturer_portal.schemas.profile import ProfileOut, ProfileUpdateIn
from lecturer_portal.storage import BlobStore, get_blob_store
from lecturer_portal.utils.auth import get_client, get_current_identity

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("/me", response_model=ProfileOut)
def get_my_profile(client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    return ProfileRepository(client).get(me)


@router.put("/me", response_model=ProfileOut)
def update_my_profile(
    body: ProfileUpdateIn,
    client: PortalClient = Depends(get_client),
    me=Depends(get_current_identity),
):
    return ProfileRepository(client).update(me, body)


@router.post("/me/avatar", response_model=ProfileOut)
async def upload_my_avatar(
    file: UploadFile = File(...),
    client: PortalClient = Depends(get_client),
    me=Depends(get_current_identity),
    store: BlobStore = Depends(get_blob_store),
):
    content = await file.read()
    return ProfileRepository(client).set_avatar(me, file.filename, content, store)
