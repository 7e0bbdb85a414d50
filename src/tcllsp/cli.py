"""
Command line entry point for the TCL language server.

    tcllsp                       # stdio (what editors launch)
    tcllsp --tcp 2087            # TCP, for attaching a debugger
    tcllsp --sync-mode batch     # editor answers GetDictList / GetItemList
    tcllsp --log-file lsp.log    # keep stdout/stderr clean, log to a file

``--sync-mode``, ``--request-timeout`` and ``--max-problems`` only seed the
settings; the editor's configuration and ``.tcllsp.toml`` override them.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from tcllsp.config import SYNC_MODES

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='tcllsp',
        description='Language server for TCL commands against a multivalue database.',
    )
    transport = p.add_mutually_exclusive_group()
    transport.add_argument('--stdio', action='store_true',
                           help='talk LSP over stdin/stdout (the default)')
    transport.add_argument('--tcp', metavar='PORT', type=int,
                           help='listen on 127.0.0.1:PORT instead of stdio')
    p.add_argument('--host', default='127.0.0.1',
                   help='interface for --tcp (default: %(default)s)')
    p.add_argument('--version', action='store_true',
                   help='print the version and exit')

    sync = p.add_argument_group('metadata')
    sync.add_argument('--sync-mode', choices=SYNC_MODES,
                      help='pull: one tcl/... request per file; '
                           'batch: GetDictList / GetItemList with pushed answers')
    sync.add_argument('--request-timeout', metavar='SECONDS', type=float,
                      help='give up on an editor request after SECONDS')
    sync.add_argument('--max-problems', metavar='N', type=int,
                      help='diagnostics reported per document')

    log = p.add_argument_group('logging')
    log.add_argument('--log-level', metavar='LEVEL', default='WARNING',
                     type=str.upper,
                     choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                     help='(default: %(default)s)')
    log.add_argument('--log-file', metavar='PATH',
                     help='append log records to PATH instead of stderr')
    return p


def launch_settings(args: argparse.Namespace) -> dict[str, Any]:
    """The settings named on the command line, keyed like ``Settings``."""
    given = {
        'sync_mode': args.sync_mode,
        'request_timeout': args.request_timeout,
        'max_number_of_problems': args.max_problems,
    }
    return {k: v for k, v in given.items() if v is not None}


def _configure_logging(level: str, log_file: str | None) -> None:
    if log_file:
        logging.basicConfig(level=level, format=LOG_FORMAT, filename=log_file)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def tcllsp(argv: list[str] | None = None) -> None:
    """Entry point for the ``tcllsp`` command."""
    args = _build_parser().parse_args(argv)

    if args.version:
        from tcllsp import __version__
        print(f'tcllsp {__version__}')
        sys.exit(0)

    _configure_logging(args.log_level, args.log_file)

    from tcllsp.server import server, set_launch_settings
    set_launch_settings(launch_settings(args))

    if args.tcp is not None:
        server.start_tcp(args.host, args.tcp)
    else:
        server.start_io()


if __name__ == '__main__':
    tcllsp()
