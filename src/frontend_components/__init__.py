"""
frontend-components - UI component catalogue server

Indexes a directory of UI component snippets (HyperUI, HeadlessUI,
DaisyUI, FlyonUI) and serves lookup and search queries over MCP.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("frontend-components")
except PackageNotFoundError:
    __version__ = "1.0.0"

__all__ = [
    "__version__",
]
