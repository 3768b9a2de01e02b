from __future__ import annotations

import logging

from lecturer_portal.client import PortalClient
from lecturer_portal.errors import NotFound
from lecturer_portal.models.registry import Profile
from lecturer_portal.repositories.base import validate_input
from lecturer_portal.schemas.profile import ProfileOut, ProfileUpdateIn
from lecturer_portal.storage import AVATAR_BUCKET, AVATAR_EXT, BlobStore, check_upload, make_object_key

logger = logging.getLogger("app.repositories.profiles")

AVATAR_MAX_SIZE = 2 * 1024 * 1024


class ProfileRepository:
    """The caller's own profile; rows are created by the signup hook, never here."""

    def __init__(self, client: PortalClient):
        self.client = client

    def get(self, owner_id) -> ProfileOut:
        rows = self.client.query(Profile, Profile.id == owner_id)
        if not rows:
            raise NotFound("Profile not found")
        return ProfileOut.model_validate(rows[0])

    def list(self, owner_id):
        rows = self.client.query(Profile, Profile.id == owner_id)
        return [ProfileOut.model_validate(r) for r in rows]

    def update(self, owner_id, patch) -> ProfileOut:
        fields = validate_input(ProfileUpdateIn, patch).model_dump(exclude_unset=True)
        if not fields:
            return self.get(owner_id)
        return self._apply(owner_id, fields)

    def set_avatar(self, owner_id, filename: str, content: bytes, store: BlobStore) -> ProfileOut:
        check_upload(filename, content, AVATAR_EXT, max_size=AVATAR_MAX_SIZE)
        key = make_object_key(owner_id, filename)
        store.upload(AVATAR_BUCKET, key, content)
        return self._apply(owner_id, {"avatar_url": store.public_url(AVATAR_BUCKET, key)})

    def _apply(self, owner_id, fields: dict) -> ProfileOut:
        rows = self.client.update(Profile, fields, Profile.id == owner_id)
        if not rows:
            raise NotFound("Profile not found")
        logger.info("Profile %s updated fields=%s", owner_id, sorted(fields))
        return ProfileOut.model_validate(rows[0])
