"""
Metadata providers.

A provider reaches the remote database account (terminal session, gateway or
native session object) and answers six questions: which files exist, open a
file, list its item ids, open its dictionary, list the dictionary's item ids
and read one dictionary item.  The server itself has no database connection;
:class:`ClientMetadataProvider` forwards every question to the editor, which
owns the session.

Editors built for the batch protocol answer whole batches instead:
:class:`BatchRequestSender` sends one ``GetDictList`` / ``GetItemList``
request naming every missing file of a scan, and the editor pushes one
``SetDictionary`` / ``SetFileItems`` payload per file back to the server.

``fetch_dictionary_payload`` / ``fetch_items_payload`` turn provider answers
into wire payloads (see :mod:`tcllsp.wire`), the same payloads a batch editor
pushes.
"""
from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterable

from tcllsp.wire import (
    encode_dictionary_entries,
    encode_file_request,
    encode_items,
    is_excluded_record,
    is_internal_name,
)

if TYPE_CHECKING:
    from pygls.lsp.server import LanguageServer

logger = logging.getLogger(__name__)

LIST_FILES = 'tcl/listFiles'
OPEN_FILE = 'tcl/openFile'
ITEM_IDS = 'tcl/itemIds'
OPEN_DICTIONARY = 'tcl/openDictionary'
DICTIONARY_ITEM_IDS = 'tcl/dictionaryItemIds'
READ_DICTIONARY_ITEM = 'tcl/readDictionaryItem'

# Batch protocol
GET_DICT_LIST = 'GetDictList'
GET_ITEM_LIST = 'GetItemList'


class MetadataProviderError(RuntimeError):
    """The remote session could not answer a metadata question."""


class MetadataProvider(ABC):
    """Interface every metadata source implements."""

    @abstractmethod
    async def list_files(self) -> list[str]:
        """Names of all files in the account."""

    @abstractmethod
    async def open_file(self, file_name: str) -> None:
        pass

    @abstractmethod
    async def item_ids(self, file_name: str) -> list[str]:
        pass

    @abstractmethod
    async def open_dictionary(self, file_name: str) -> None:
        pass

    @abstractmethod
    async def dictionary_item_ids(self, file_name: str) -> list[str]:
        pass

    @abstractmethod
    async def read_dictionary_item(self, file_name: str, item_id: str) -> str:
        """Raw record of one dictionary item, starting at the kind attribute."""


class _ClientRequests:
    """Server-to-client requests with a timeout, errors as MetadataProviderError."""

    def __init__(self, server: LanguageServer, timeout: float = 30.0):
        self._server = server
        self.timeout = timeout

    async def _request(self, method: str, params: Any = None) -> Any:
        try:
            future = self._server.protocol.send_request_async(
                method, {} if params is None else params,
            )
            return await asyncio.wait_for(future, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise MetadataProviderError(f'{method} timed out after {self.timeout}s') from e
        except MetadataProviderError:
            raise
        except Exception as e:
            raise MetadataProviderError(f'{method} failed: {e}') from e


class ClientMetadataProvider(_ClientRequests, MetadataProvider):
    """Ask the LSP client, which holds the database session, over custom requests."""

    async def list_files(self) -> list[str]:
        return _strings(await self._request(LIST_FILES))

    async def open_file(self, file_name: str) -> None:
        await self._request(OPEN_FILE, {'file': file_name})

    async def item_ids(self, file_name: str) -> list[str]:
        return _strings(await self._request(ITEM_IDS, {'file': file_name}))

    async def open_dictionary(self, file_name: str) -> None:
        await self._request(OPEN_DICTIONARY, {'file': file_name})

    async def dictionary_item_ids(self, file_name: str) -> list[str]:
        return _strings(await self._request(DICTIONARY_ITEM_IDS, {'file': file_name}))

    async def read_dictionary_item(self, file_name: str, item_id: str) -> str:
        result = await self._request(READ_DICTIONARY_ITEM, {'file': file_name, 'item': item_id})
        return '' if result is None else str(result)


class BatchRequestSender(_ClientRequests):
    """Send one batch request per scan; the editor pushes the answers.

    The request completes once the editor has pushed a payload for every
    file it could load.
    """

    async def request_dictionaries(self, file_names: Iterable[str]) -> None:
        await self._request(GET_DICT_LIST, encode_file_request(file_names))

    async def request_items(self, file_names: Iterable[str]) -> None:
        await self._request(GET_ITEM_LIST, encode_file_request(file_names))


def _strings(result: Any) -> list[str]:
    if not result:
        return []
    if isinstance(result, str):
        return [result]
    return [str(x) for x in result]


# ---------------------------------------------------------------------------
# Provider answers → wire payloads
# ---------------------------------------------------------------------------

async def fetch_dictionary_payload(provider: MetadataProvider, file_name: str) -> str:
    """Read every dictionary item of *file_name* and encode the response."""
    await provider.open_dictionary(file_name)
    entries: list[tuple[str, str]] = []
    for item_id in await provider.dictionary_item_ids(file_name):
        if not item_id or is_internal_name(item_id):
            continue
        record = await provider.read_dictionary_item(file_name, item_id)
        if is_excluded_record(record):
            continue
        entries.append((item_id, record))
    logger.debug('fetch_dictionary_payload: %s → %d items', file_name, len(entries))
    return encode_dictionary_entries(file_name, entries)


async def fetch_items_payload(provider: MetadataProvider, file_name: str) -> str:
    """Read the item ids of *file_name* and encode the response."""
    await provider.open_file(file_name)
    items = [i for i in await provider.item_ids(file_name) if i]
    logger.debug('fetch_items_payload: %s → %d items', file_name, len(items))
    return encode_items(file_name, items)
