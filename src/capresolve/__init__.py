"""capresolve: Infer the public capability unit a build dependency implies."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
