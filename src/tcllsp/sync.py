"""
Metadata synchronizer.

Bridges "the validator found a file whose dictionary/items are unknown" and
"the provider fetched it".  ``request_*`` calls are fire-and-forget: they
schedule a task on the running event loop and return immediately, so a
document scan never waits on the database.  Each missing file is fetched
with its own provider round-trip; results go through the wire codec into the
:class:`~tcllsp.store.MetadataStore`, whose insert-if-absent semantics make
duplicate or late responses harmless.

Failures are logged and the pending set for that kind is cleared; the names
stay unresolved and the next document scan asks again.

With a :class:`~tcllsp.provider.BatchRequestSender` attached as ``batch``,
all names claimed by one request go out in a single batch request and the
editor pushes the payloads back through ``apply_*_payload``.  Names it did
not answer by the time the request completes can be claimed again.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Iterable

from tcllsp.provider import (
    BatchRequestSender,
    MetadataProvider,
    fetch_dictionary_payload,
    fetch_items_payload,
)
from tcllsp.store import MetadataStore
from tcllsp.wire import decode_dictionary, decode_items, split_file_names

logger = logging.getLogger(__name__)


class MetadataSynchronizer:

    def __init__(
        self,
        store: MetadataStore,
        provider: MetadataProvider,
        on_update: Callable[[], None] | None = None,
        batch: BatchRequestSender | None = None,
    ):
        self.store = store
        self.provider = provider
        self.on_update = on_update
        self.batch = batch
        self._pending_dictionaries: set[str] = set()
        self._pending_items: set[str] = set()
        self._tasks: set[asyncio.Task] = set()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def is_pending_dictionary(self, name: str) -> bool:
        return name in self._pending_dictionaries

    def is_pending_items(self, name: str) -> bool:
        return name in self._pending_items

    # ------------------------------------------------------------------
    # Applying responses (also used by push requests from the editor)
    # ------------------------------------------------------------------

    def apply_file_names(self, payload: str) -> None:
        names = split_file_names(payload)
        self.store.replace_known_file_names(names)
        logger.info('apply_file_names: %d files known', len(names))
        self._notify()

    def apply_dictionary_payload(self, payload: str) -> bool:
        file_name, fields = decode_dictionary(payload)
        self._pending_dictionaries.discard(file_name)
        added = self.store.add_dictionary(file_name, fields)
        logger.debug('apply_dictionary_payload: %s (%d fields, added=%s)',
                     file_name, len(fields), added)
        if added:
            self._notify()
        return added

    def apply_items_payload(self, payload: str) -> bool:
        file_name, items = decode_items(payload)
        self._pending_items.discard(file_name)
        added = self.store.add_file(file_name, items)
        logger.debug('apply_items_payload: %s (%d items, added=%s)',
                     file_name, len(items), added)
        if added:
            self._notify()
        return added

    def _notify(self) -> None:
        if self.on_update is None:
            return
        try:
            self.on_update()
        except Exception:
            logger.warning('on_update callback failed', exc_info=True)

    # ------------------------------------------------------------------
    # Fire-and-forget entry points
    # ------------------------------------------------------------------

    def request_dictionaries(self, file_names: str) -> asyncio.Task | None:
        """Schedule dictionary fetches for a ``|``-joined list of file names."""
        wanted = self._claim(split_file_names(file_names), self.store.has_dictionary,
                             self._pending_dictionaries)
        if not wanted:
            return None
        if self.batch is not None:
            return self._spawn(self._send_batch(
                self.batch.request_dictionaries, wanted, self._pending_dictionaries))
        return self._spawn(self.fetch_dictionaries(wanted))

    def request_items(self, file_names: str) -> asyncio.Task | None:
        """Schedule item-list fetches for a ``|``-joined list of file names."""
        wanted = self._claim(split_file_names(file_names), self.store.has_file,
                             self._pending_items)
        if not wanted:
            return None
        if self.batch is not None:
            return self._spawn(self._send_batch(
                self.batch.request_items, wanted, self._pending_items))
        return self._spawn(self.fetch_items(wanted))

    def request_file_names(self) -> asyncio.Task:
        """Schedule a refresh of the account's file name list."""
        return self._spawn(self.refresh_file_names())

    @staticmethod
    def _claim(names: list[str], known: Callable[[str], bool], pending: set[str]) -> list[str]:
        wanted = [n for n in names if not known(n) and n not in pending]
        pending.update(wanted)
        return wanted

    def _spawn(self, coro) -> asyncio.Task:
        task = asyncio.ensure_future(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    # ------------------------------------------------------------------
    # Awaitable fetches
    # ------------------------------------------------------------------

    async def fetch_dictionaries(self, file_names: Iterable[str]) -> None:
        names = list(file_names)
        self._pending_dictionaries.update(names)
        for name in names:
            try:
                payload = await fetch_dictionary_payload(self.provider, name)
                self.apply_dictionary_payload(payload)
            except Exception as e:
                logger.warning('fetch_dictionaries: %s failed: %s', name, e)
                self._pending_dictionaries.clear()
                return

    async def fetch_items(self, file_names: Iterable[str]) -> None:
        names = list(file_names)
        self._pending_items.update(names)
        for name in names:
            try:
                payload = await fetch_items_payload(self.provider, name)
                self.apply_items_payload(payload)
            except Exception as e:
                logger.warning('fetch_items: %s failed: %s', name, e)
                self._pending_items.clear()
                return

    async def _send_batch(
        self,
        send: Callable[[list[str]], Awaitable[None]],
        names: list[str],
        pending: set[str],
    ) -> None:
        try:
            await send(names)
        except Exception as e:
            logger.warning('batch request for %s failed: %s', '|'.join(names), e)
        finally:
            pending.difference_update(names)

    async def refresh_file_names(self) -> bool:
        try:
            names = await self.provider.list_files()
        except Exception as e:
            logger.warning('refresh_file_names failed: %s', e)
            return False
        self.store.replace_known_file_names(names)
        logger.info('refresh_file_names: %d files known', len(self.store.known_file_names()))
        self._notify()
        return True
