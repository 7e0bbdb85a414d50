"""handlers/__init__.py: re-export handler functions for convenience."""
from .diagnostics import get_diagnostics, validate_document, request_metadata
from .completion import get_completions, resolve_completion
from .hover import get_hover

__all__ = [
    'get_diagnostics', 'validate_document', 'request_metadata',
    'get_completions', 'resolve_completion', 'get_hover',
]
