import logging
import threading
import uuid
from contextlib import contextmanager
from typing import Any, Iterable, Optional

from sqlalchemy import func, select, update
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import flag_modified

from lecturer_portal import row_security
from lecturer_portal.errors import ConstraintViolation, DataAccessError, PortalError, TransportError
from lecturer_portal.models.registry import AuthUser

logger = logging.getLogger("app.client")


class PortalClient:
    """
    Session-aware handle every repository call goes through.

    The client carries the caller identity into the session; row visibility and
    write permission are decided by the policies in ``row_security``, never here.
    Each mutating call is one commit. Failures come back as ``PortalError``
    subclasses and leave the session rolled back.

    The session is not thread-safe. Code that shares one client across worker
    threads holds ``lock`` for the whole unit of work, row conversion included.
    """

    def __init__(self, db: Session, identity: Optional[uuid.UUID] = None):
        self.db = db
        self.identity = identity
        self.lock = threading.RLock()
        db.info[row_security.IDENTITY_KEY] = identity

    def current_user(self) -> Optional[AuthUser]:
        if self.identity is None:
            return None
        with self._remote_call("auth"):
            return self.db.get(AuthUser, self.identity)

    def current_user_id(self) -> Optional[uuid.UUID]:
        user = self.current_user()
        return user.id if user else None

    # ===== reads =====
    def query(self, model, *criteria, order_by: Iterable[Any] = ()) -> list:
        stmt = (
            select(model)
            .where(*criteria)
            .order_by(*order_by)
            .execution_options(populate_existing=True)
        )
        with self._remote_call(model.__tablename__):
            return list(self.db.scalars(stmt).all())

    def count(self, model, *criteria) -> int:
        stmt = select(func.count()).select_from(model).where(*criteria)
        with self._remote_call(model.__tablename__):
            return int(self.db.scalar(stmt) or 0)

    # ===== writes =====
    def insert(self, model, rows: list[dict]) -> list:
        objs = [model(**row) for row in rows]
        with self._remote_call(model.__tablename__, write=True):
            self.db.add_all(objs)
            self.db.commit()
            for obj in objs:
                self.db.refresh(obj)
        logger.info("insert %s rows=%d identity=%s", model.__tablename__, len(objs), self.identity)
        return objs

    def update(self, model, patch: dict, *criteria) -> list:
        with self._remote_call(model.__tablename__, write=True):
            rows = list(self.db.scalars(select(model).where(*criteria)).all())
            if not rows:
                return []
            for row in rows:
                for key, value in patch.items():
                    setattr(row, key, value)
                if patch and not self.db.is_modified(row):
                    # same values still count as an update (updated_at moves)
                    flag_modified(row, next(iter(patch)))
            self.db.commit()
            for row in rows:
                self.db.refresh(row)
        logger.info("update %s rows=%d fields=%s", model.__tablename__, len(rows), sorted(patch))
        return rows

    def update_where(self, model, values: dict, *criteria) -> int:
        """
        One UPDATE statement guarded by ``criteria``; returns the matched row count.

        Nothing is read first, so a concurrent writer cannot slip in between the
        check and the write. Loaded rows are not synchronized, read them again.
        """
        stmt = (
            update(model)
            .where(*criteria)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        with self._remote_call(model.__tablename__, write=True):
            matched = self.db.execute(stmt).rowcount
            self.db.commit()
        logger.info("update_where %s rows=%d fields=%s", model.__tablename__, matched, sorted(values))
        return matched

    def delete(self, model, *criteria) -> list:
        """Delete matching rows and return their ids (empty when nothing matched)."""
        with self._remote_call(model.__tablename__, write=True):
            rows = list(self.db.scalars(select(model).where(*criteria)).all())
            ids = [row.id for row in rows]
            for row in rows:
                self.db.delete(row)
            self.db.commit()
        logger.info("delete %s rows=%d", model.__tablename__, len(ids))
        return ids

    @contextmanager
    def _remote_call(self, table: str, write: bool = False):
        try:
            yield
        except PortalError:
            self.db.rollback()
            raise
        except IntegrityError as e:
            self.db.rollback()
            message = str(e.orig) if e.orig is not None else str(e)
            logger.info("constraint violation on %s: %s", table, message)
            raise ConstraintViolation(message) from e
        except OperationalError as e:
            self.db.rollback()
            if e.connection_invalidated or not write:
                logger.exception("transport failure on %s", table)
                raise TransportError() from e
            raise DataAccessError(str(e.orig)) from e
        except DBAPIError as e:
            self.db.rollback()
            logger.exception("database error on %s", table)
            raise DataAccessError(str(e.orig)) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("data access error on %s", table)
            raise DataAccessError(str(e)) from e
