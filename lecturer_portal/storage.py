import logging
import uuid
from pathlib import Path, PurePosixPath

from lecturer_portal.config import settings
from lecturer_portal.errors import ValidationFailed

logger = logging.getLogger("app.storage")

ASSIGNMENT_BUCKET = "assignments"
MATERIAL_BUCKET = "study_materials"
AVATAR_BUCKET = "avatars"

# PDF and Word only
DOCUMENT_EXT = {".pdf", ".doc", ".docx"}
AVATAR_EXT = {".jpg", ".jpeg", ".png", ".webp"}


def make_object_key(entity_id, filename: str) -> str:
    """
    (42, "report.PDF") -> "42/<random hex>.pdf"
    """
    ext = PurePosixPath(filename or "").suffix.lower().lstrip(".")
    token = uuid.uuid4().hex
    return f"{entity_id}/{token}.{ext}" if ext else f"{entity_id}/{token}"


def check_upload(filename: str, content: bytes, allowed_ext: set, max_size: int | None = None):
    suffix = PurePosixPath(filename or "").suffix.lower()
    if suffix not in allowed_ext:
        raise ValidationFailed(f"Only {sorted(allowed_ext)} are allowed")
    limit = max_size or settings.MAX_UPLOAD_SIZE
    if len(content) > limit:
        raise ValidationFailed(f"File too large (max {limit // (1024 * 1024)}MB)")


class BlobStore:
    """Bucketed file store on the local disk, served under ``public_base``."""

    def __init__(self, root, public_base: str):
        self.root = Path(root)
        self.public_base = public_base.rstrip("/")

    def _path(self, bucket: str, key: str) -> Path:
        path = (self.root / bucket / key).resolve()
        if self.root.resolve() not in path.parents:
            raise ValidationFailed(f"Invalid object key: {key}")
        return path

    def upload(self, bucket: str, key: str, content: bytes) -> str:
        path = self._path(bucket, key)
        if path.exists():
            raise FileExistsError(f"{bucket}/{key} already exists")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        logger.info("stored %s/%s (%d bytes)", bucket, key, len(content))
        return key

    def download(self, bucket: str, key: str) -> bytes:
        return self._path(bucket, key).read_bytes()

    def remove(self, bucket: str, key: str) -> bool:
        path = self._path(bucket, key)
        if not path.exists():
            return False
        path.unlink()
        return True

    def public_url(self, bucket: str, key: str) -> str:
        return f"{self.public_base}/{bucket}/{key}"


_store = BlobStore(settings.STORAGE_DIR, settings.STORAGE_PUBLIC_BASE)


def get_blob_store() -> BlobStore:
    return _store
