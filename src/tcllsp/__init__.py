"""tcllsp – TCL Language Server for multivalue databases."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version('tcllsp')
except PackageNotFoundError:
    __version__ = '0.0.0.dev0'
