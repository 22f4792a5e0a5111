from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Protocol, Union

from qlisp.config import get_prelude_root

log = logging.getLogger(__name__)

PRELUDE_FILE = 'basic.lisp'


class _HasEvalSource(Protocol):
    def eval(self, code: str, file_name: str = ...) -> object: ...


def read_entire_file(path: Union[str, Path]) -> Optional[str]:
    """Return the file's text, or None if it cannot be read."""
    try:
        return Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as err:
        log.debug("reading %s failed: %s", path, err)
        return None


def load_file(itp: _HasEvalSource, path: Union[str, Path]) -> bool:
    """Batch mode: read and evaluate every top-level expression of a file.

    A missing or undecodable file is logged and skipped (returns False).
    """
    code = read_entire_file(path)
    if code is None:
        log.warning("Couldn't load file at %s, skipping", path)
        return False
    itp.eval(code, file_name=str(path))
    return True


def load_prelude(itp: _HasEvalSource) -> bool:
    root = get_prelude_root()
    prelude = root / PRELUDE_FILE
    log.debug("loading prelude from %s", prelude)
    return load_file(itp, prelude)
