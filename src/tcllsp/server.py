"""
tcllsp Language Server.

Registers LSP capabilities and wires the metadata store, the synchronizer
and the TCL handlers.  Diagnostics are always published from the latest
text of a document using whatever metadata is cached; missing metadata is
requested in the background and every open document is re-validated when
it arrives.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any

from pygls.lsp.server import LanguageServer
from lsprotocol import types as lsp

logger = logging.getLogger(__name__)

from tcllsp import __version__
from tcllsp.config import Settings, SettingsResolver, settings_section
from tcllsp.document import TclDocument, parse_document
from tcllsp.handlers import (
    get_completions,
    get_hover,
    request_metadata,
    resolve_completion,
    validate_document,
)
from tcllsp.provider import BatchRequestSender, ClientMetadataProvider
from tcllsp.store import MetadataStore
from tcllsp.sync import MetadataSynchronizer

# ---------------------------------------------------------------------------
# Server instance + per-session state
# ---------------------------------------------------------------------------

server = LanguageServer(
    'tcllsp', __version__,
    text_document_sync_kind=lsp.TextDocumentSyncKind.Full,
)

# Per-URI document store (populated on open/change).
_docs: dict[str, TclDocument] = {}

# Metadata cached for this session; shared by all documents.
_store = MetadataStore()

_provider = ClientMetadataProvider(server)
_batch_sender = BatchRequestSender(server)

# Options the process was started with (see tcllsp.cli).
_launch_settings: dict[str, Any] = {}

_settings_resolver = SettingsResolver()
_settings = Settings()

# Whether the client accepts DiagnosticRelatedInformation.
_related_information = False

# Debounce state: pending asyncio tasks for each URI.
_pending_tasks: dict[str, asyncio.Task] = {}


def _on_metadata_update() -> None:
    """New metadata landed in the store: re-validate every open document."""
    for uri in list(_docs):
        _schedule_update(uri, delay=_settings.debounce)


_synchronizer = MetadataSynchronizer(_store, _provider, on_update=_on_metadata_update)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _publish_diagnostics(uri: str) -> None:
    doc = _docs.get(uri)
    if doc is None:
        return
    result = validate_document(
        doc, _store,
        related_information=_related_information,
        max_problems=_settings.max_number_of_problems,
    )
    logger.debug('_publish_diagnostics: %s → %d diagnostics', uri, len(result.diagnostics))
    server.text_document_publish_diagnostics(
        lsp.PublishDiagnosticsParams(uri=uri, diagnostics=result.diagnostics, version=doc.version)
    )
    request_metadata(result, _synchronizer)


async def _debounced_update(uri: str, delay: float) -> None:
    """Wait *delay* seconds, then validate and publish diagnostics.

    Called via asyncio.create_task so it can be cancelled if the document
    changes again before the delay expires (debounce while typing).
    """
    await asyncio.sleep(delay)
    logger.debug('_debounced_update: running for %s', uri)
    _publish_diagnostics(uri)


def _schedule_update(uri: str, delay: float) -> None:
    """Cancel any pending update for *uri* and schedule a new debounced one."""
    existing = _pending_tasks.pop(uri, None)
    if existing is not None:
        existing.cancel()
    task = asyncio.ensure_future(_debounced_update(uri, delay))
    _pending_tasks[uri] = task

    def _forget(t: asyncio.Task) -> None:
        # A cancelled task must not drop its replacement.
        if _pending_tasks.get(uri) is t:
            del _pending_tasks[uri]

    task.add_done_callback(_forget)


def _apply_log_level(raw: str | None) -> None:
    """Set the root logger level from a string like 'debug', 'warning', etc."""
    if not raw:
        return
    level = getattr(logging, raw.upper(), None)
    if isinstance(level, int):
        logging.getLogger().setLevel(level)


def _apply_settings() -> None:
    global _settings
    _settings = _settings_resolver.resolve()
    _provider.timeout = _settings.request_timeout
    _batch_sender.timeout = _settings.request_timeout
    _synchronizer.batch = _batch_sender if _settings.sync_mode == 'batch' else None
    _apply_log_level(_settings.log_level)


def set_launch_settings(settings: dict[str, Any] | None) -> None:
    """Record command-line settings; client and project config override them."""
    global _settings_resolver
    _launch_settings.clear()
    _launch_settings.update(settings or {})
    _settings_resolver = SettingsResolver(launch=_launch_settings)
    _apply_settings()


def _supports_related_information(capabilities: lsp.ClientCapabilities | None) -> bool:
    td = getattr(capabilities, 'text_document', None)
    pd = getattr(td, 'publish_diagnostics', None)
    return bool(getattr(pd, 'related_information', False))


def _payload(params: Any) -> str | None:
    """Custom requests carry a bare string, ``["..."]`` or ``{"payload": "..."}``."""
    if isinstance(params, str):
        return params
    if isinstance(params, (list, tuple)) and len(params) == 1:
        return _payload(params[0])
    if isinstance(params, dict):
        value = params.get('payload')
    else:
        value = getattr(params, 'payload', None)
    return value if isinstance(value, str) else None


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

@server.feature(lsp.INITIALIZE)
def on_initialize(params: lsp.InitializeParams):
    global _settings_resolver, _related_information
    workspace_root = None
    if params.root_uri:
        # Strip the file:// scheme for local path use
        uri = params.root_uri
        if uri.startswith('file://'):
            workspace_root = uri[7:]
        else:
            workspace_root = uri

    _related_information = _supports_related_information(params.capabilities)
    _settings_resolver = SettingsResolver(workspace_root=workspace_root, launch=_launch_settings)
    _settings_resolver.set_client_settings(
        settings_section(getattr(params, 'initialization_options', None))
    )
    _apply_settings()


@server.feature(lsp.INITIALIZED)
def on_initialized(params: lsp.InitializedParams):
    """Ask the editor for the account's file list (best effort).

    Batch editors push ``FileList`` unasked.
    """
    if _synchronizer.batch is None:
        _synchronizer.request_file_names()


@server.feature(lsp.WORKSPACE_DID_CHANGE_CONFIGURATION)
def did_change_configuration(params: lsp.DidChangeConfigurationParams):
    """Handle live config changes (e.g. ``tcl.maxNumberOfProblems`` in VS Code)."""
    settings = getattr(params, 'settings', None) or {}
    _settings_resolver.set_client_settings(settings_section(settings))
    _apply_settings()
    for uri in list(_docs):
        _schedule_update(uri, delay=0.0)


# ---------------------------------------------------------------------------
# Text document synchronisation
# ---------------------------------------------------------------------------

@server.feature(lsp.TEXT_DOCUMENT_DID_OPEN)
def did_open(params: lsp.DidOpenTextDocumentParams):
    td = params.text_document
    _docs[td.uri] = parse_document(td.uri, td.text, td.version)
    # Publish immediately on open (not debounced)
    _publish_diagnostics(td.uri)


@server.feature(lsp.TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: lsp.DidChangeTextDocumentParams):
    uri = params.text_document.uri
    source = params.content_changes[-1].text
    _docs[uri] = parse_document(uri, source, params.text_document.version)
    # Debounce: wait for the user to pause typing
    _schedule_update(uri, delay=_settings.debounce)


@server.feature(lsp.TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: lsp.DidCloseTextDocumentParams):
    uri = params.text_document.uri
    existing = _pending_tasks.pop(uri, None)
    if existing is not None:
        existing.cancel()
    _docs.pop(uri, None)


# ---------------------------------------------------------------------------
# Completion
# ---------------------------------------------------------------------------

@server.feature(
    lsp.TEXT_DOCUMENT_COMPLETION,
    lsp.CompletionOptions(trigger_characters=[' ', '='], resolve_provider=True),
)
def completion(params: lsp.CompletionParams) -> lsp.CompletionList | None:
    doc = _docs.get(params.text_document.uri)
    if doc is None:
        return None
    items = get_completions(doc, params.position, _store)
    return lsp.CompletionList(is_incomplete=False, items=items)


@server.feature(lsp.COMPLETION_ITEM_RESOLVE)
def completion_resolve(item: lsp.CompletionItem) -> lsp.CompletionItem:
    return resolve_completion(item)


# ---------------------------------------------------------------------------
# Hover
# ---------------------------------------------------------------------------

@server.feature(lsp.TEXT_DOCUMENT_HOVER)
def hover(params: lsp.HoverParams) -> lsp.Hover | None:
    doc = _docs.get(params.text_document.uri)
    if doc is None:
        return None
    return get_hover(doc, params.position, _store)


# ---------------------------------------------------------------------------
# Metadata pushed by the editor's connection layer
# (batch editors use the bare names: FileList, SetFileItems, SetDictionary)
# ---------------------------------------------------------------------------

@server.feature('tcl/fileList')
@server.feature('FileList')
def set_file_list(params):
    """Replace the account's file names with a ``|``-joined list."""
    payload = _payload(params)
    if payload is None:
        logger.warning('tcl/fileList: no payload')
        return None
    _synchronizer.apply_file_names(payload)
    return None


@server.feature('tcl/setFileItems')
@server.feature('SetFileItems')
def set_file_items(params):
    payload = _payload(params)
    try:
        _synchronizer.apply_items_payload(payload or '')
    except ValueError as e:
        logger.warning('tcl/setFileItems: %s', e)
    return None


@server.feature('tcl/setDictionary')
@server.feature('SetDictionary')
def set_dictionary(params):
    payload = _payload(params)
    try:
        _synchronizer.apply_dictionary_payload(payload or '')
    except ValueError as e:
        logger.warning('tcl/setDictionary: %s', e)
    return None


@server.command('tcl.refreshFileList')
async def cmd_refresh_file_list(*args):
    """Re-fetch the account file list; returns whether it succeeded."""
    return await _synchronizer.refresh_file_names()
