"""Process memory query backing the `memtotal` builtin."""
from __future__ import annotations

import os
import sys
from pathlib import Path

_STATM = Path("/proc/self/statm")


def current_process_memory_bytes() -> int:
    """Resident set size of this process in bytes, 0 when unavailable."""
    if _STATM.exists():
        # statm reports pages: size resident shared text lib data dt
        resident_pages = int(_STATM.read_text().split()[1])
        return resident_pages * os.sysconf("SC_PAGE_SIZE")
    try:
        import resource
    except ImportError:
        return 0
    peak = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # ru_maxrss is in kilobytes on Linux and bytes on macOS
    return peak if sys.platform == "darwin" else peak * 1024
