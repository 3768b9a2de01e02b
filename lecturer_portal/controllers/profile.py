from __future__ import annotations

from lecturer_portal.controllers.base import Screen
from lecturer_portal.errors import PortalError
from lecturer_portal.repositories.profiles import ProfileRepository
from lecturer_portal.storage import BlobStore, get_blob_store


class ProfileScreen(Screen):
    def __init__(self, client, store: BlobStore | None = None):
        super().__init__(client)
        self.repository = ProfileRepository(client)
        self.store = store or get_blob_store()
        self.profile = None

    async def activate(self) -> bool:
        if await self.resolve_owner() is None:
            self.loading = False
            return False
        try:
            self.profile = await self.call(self.repository.get, self.owner_id)
        except PortalError as e:
            self.fail("Error fetching profile", e)
        finally:
            self.loading = False
        return self.profile is not None

    async def save(self, fields):
        if self.is_pending("save"):
            return None
        with self.busy("save"):
            if await self.resolve_owner() is None:
                return None
            try:
                self.profile = await self.call(self.repository.update, self.owner_id, fields)
            except PortalError as e:
                self.fail("Error updating profile", e)
                return None
            self.notify("Profile updated successfully")
            return self.profile

    async def upload_avatar(self, filename: str, content: bytes):
        if await self.resolve_owner() is None:
            return None
        try:
            self.profile = await self.call(
                self.repository.set_avatar, self.owner_id, filename, content, self.store
            )
        except PortalError as e:
            self.fail("Error uploading avatar", e)
            return None
        return self.profile
