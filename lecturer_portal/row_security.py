"""
Storage-side policies applied to every ORM session.

- rows of owned tables are visible only when ``lecturer_id`` equals the
  session identity (profiles: when ``id`` equals it)
- written rows must keep that owner, otherwise AccessDenied
- creating an auth user creates its profile

Callers never check ownership themselves; they set ``session.info["identity"]``
(``PortalClient`` does) and let these hooks decide.
"""
import logging

from sqlalchemy import event, false, inspect
from sqlalchemy.orm import Session, with_loader_criteria

from lecturer_portal.errors import AccessDenied
from lecturer_portal.models.mixins import OwnedMixin, utcnow
from lecturer_portal.models.registry import AuthUser, Profile

logger = logging.getLogger("app.row_security")

IDENTITY_KEY = "identity"
DEFAULT_FULL_NAME = "Lecturer"


def session_identity(session: Session):
    return session.info.get(IDENTITY_KEY)


def _is_protected(cls) -> bool:
    return isinstance(cls, type) and issubclass(cls, (OwnedMixin, Profile))


def _owner_column(cls):
    return getattr(cls, cls.__owner_column__)


def _violation(cls) -> str:
    return f'new row violates row-level security policy for table "{cls.__tablename__}"'


@event.listens_for(Session, "do_orm_execute")
def _restrict_to_owner(state):
    identity = session_identity(state.session)

    if state.is_select:
        if state.is_column_load or state.is_relationship_load:
            return
        if identity is None:
            owned = with_loader_criteria(OwnedMixin, lambda cls: false(), include_aliases=True)
        else:
            owned = with_loader_criteria(
                OwnedMixin,
                lambda cls: cls.lecturer_id == identity,
                include_aliases=True,
            )
        state.statement = state.statement.options(
            owned,
            with_loader_criteria(Profile, Profile.id == identity, include_aliases=True),
        )
        return

    mapper = state.bind_mapper
    cls = mapper.class_ if mapper is not None else None
    if not _is_protected(cls):
        return

    if state.is_update or state.is_delete:
        state.statement = state.statement.where(_owner_column(cls) == identity)
    elif state.is_insert:
        params = state.parameters
        rows = params if isinstance(params, list) else [params or {}]
        for row in rows:
            if row.get(cls.__owner_column__) != identity:
                raise AccessDenied(_violation(cls))


@event.listens_for(Session, "before_flush")
def _check_written_rows(session, flush_context, instances):
    identity = session_identity(session)

    for obj in session.new:
        cls = type(obj)
        if _is_protected(cls) and getattr(obj, cls.__owner_column__) != identity:
            logger.warning("Rejected insert into %s for identity=%s", cls.__tablename__, identity)
            raise AccessDenied(_violation(cls))

    for obj in session.dirty:
        cls = type(obj)
        if not _is_protected(cls):
            continue
        owner_changed = inspect(obj).attrs[cls.__owner_column__].history.has_changes()
        if owner_changed or getattr(obj, cls.__owner_column__) != identity:
            logger.warning("Rejected update on %s for identity=%s", cls.__tablename__, identity)
            raise AccessDenied(_violation(cls))

    for obj in session.deleted:
        cls = type(obj)
        if _is_protected(cls) and getattr(obj, cls.__owner_column__) != identity:
            raise AccessDenied(f'permission denied for table "{cls.__tablename__}"')


@event.listens_for(AuthUser, "after_insert")
def _create_profile(mapper, connection, target):
    # runs inside the signup transaction, outside the row policies
    meta = target.user_metadata or {}
    now = utcnow()
    connection.execute(
        Profile.__table__.insert().values(
            id=target.id,
            full_name=meta.get("full_name") or DEFAULT_FULL_NAME,
            email=target.email,
            created_at=now,
            updated_at=now,
        )
    )
    logger.info("Created profile for new identity %s", target.id)
