from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Optional

from starlette.concurrency import run_in_threadpool

from lecturer_portal.client import PortalClient
from lecturer_portal.errors import PortalError

logger = logging.getLogger("app.controllers")

Confirm = Callable[[str], bool]


@dataclass
class Notice:
    """Transient notification shown to the lecturer."""

    title: str
    description: Optional[str] = None
    variant: str = "default"  # "destructive" for failures


class Screen:
    """
    Shared plumbing: owner resolution, notices and per-action pending flags.

    While an action is pending, triggering the same action again is ignored;
    other actions still go through.
    """

    def __init__(self, client: PortalClient):
        self.client = client
        self.owner_id = None
        self.loading = True
        self.notices: list[Notice] = []
        self._pending: set = set()

    async def call(self, fn, *args, **kwargs):
        # screens sharing a client take turns on its session
        return await run_in_threadpool(self._locked, fn, args, kwargs)

    def _locked(self, fn, args, kwargs):
        with self.client.lock:
            return fn(*args, **kwargs)

    def notify(self, title: str, description: str | None = None, variant: str = "default"):
        self.notices.append(Notice(title=title, description=description, variant=variant))

    def fail(self, title: str, exc: PortalError):
        logger.info("%s: %s", title, exc.message)
        self.notify(title, exc.message, variant="destructive")

    def is_pending(self, action) -> bool:
        return action in self._pending

    @contextmanager
    def busy(self, action):
        self._pending.add(action)
        try:
            yield
        finally:
            self._pending.discard(action)

    async def resolve_owner(self):
        if self.owner_id is None:
            self.owner_id = await self.call(self.client.current_user_id)
        return self.owner_id


class ListScreen(Screen):
    """
    A screen bound to one repository: list on activation, a create/edit dialog
    and delete after confirmation. ``items`` is replaced on every refresh.
    """

    repository_class: Any = None
    noun = "item"
    plural = "items"
    created_title = "Created successfully"
    updated_title = "Updated successfully"
    deleted_title = "Deleted successfully"
    add_verb = "adding"
    editable = True

    def __init__(self, client: PortalClient):
        super().__init__(client)
        self.repository = self.repository_class(client)
        self.items: list = []
        self.dialog_open = False
        self.editing = None

    def fetch(self):
        return self.repository.list(self.owner_id)

    async def activate(self) -> bool:
        if await self.resolve_owner() is None:
            self.loading = False
            return False
        await self.refresh()
        return True

    async def refresh(self):
        try:
            self.items = await self.call(self.fetch)
        except PortalError as e:
            self.fail(f"Error fetching {self.plural}", e)
        finally:
            self.loading = False

    def open_dialog(self, item=None):
        self.editing = item if self.editable else None
        self.dialog_open = True

    def close_dialog(self):
        self.dialog_open = False
        self.editing = None

    async def after_save(self, row):
        """Hook for follow-up steps (uploads, warnings) once a row is saved."""

    async def submit(self, fields):
        if self.is_pending("submit"):
            logger.debug("%s submit ignored, previous one still pending", self.noun)
            return None

        with self.busy("submit"):
            owner_id = await self.resolve_owner()
            if owner_id is None:
                return None

            editing = self.editing
            try:
                if editing is not None:
                    row = await self.call(self.repository.update, editing.id, fields)
                else:
                    row = await self.call(self.repository.create, owner_id, fields)
            except PortalError as e:
                verb = "updating" if editing is not None else self.add_verb
                self.fail(f"Error {verb} {self.noun}", e)
                return None

            self.notify(self.updated_title if editing is not None else self.created_title)
            await self.after_save(row)
            await self.refresh()
            self.close_dialog()
            return row

    async def remove(self, row_id, confirm: Confirm) -> bool:
        if not confirm(f"Are you sure you want to delete this {self.noun}?"):
            return False

        action = ("delete", row_id)
        if self.is_pending(action):
            return False

        with self.busy(action):
            try:
                await self.call(self.repository.delete, row_id)
            except PortalError as e:
                self.fail(f"Error deleting {self.noun}", e)
                return False
            self.notify(self.deleted_title)
            await self.refresh()
            return True
