"""Runtime configuration resolved from CLI flags and the environment."""

import os
from pathlib import Path
from typing import Optional

DOCS_ROOT_ENV = "LIGHTDOCS_DOCS_ROOT"
DEFAULT_DOCS_DIRNAME = "compression-docs"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8787


def resolve_docs_root(explicit: Optional[str] = None) -> Path:
    """Locate the markdown corpus.

    Precedence: the explicit CLI value, then ``LIGHTDOCS_DOCS_ROOT``,
    then ``./compression-docs``.
    """
    value = explicit or os.environ.get(DOCS_ROOT_ENV)
    if value:
        return Path(value).expanduser()
    return Path.cwd() / DEFAULT_DOCS_DIRNAME
