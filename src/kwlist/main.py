import threading
from typing import Optional

from kwlist import logconfig

_INIT_LOCK = threading.Lock()
_is_initialized = False


def init(level: Optional[str] = None, force_reload: bool = False) -> None:
    """
    Initialize logging for the kwlist library.

    ``init()`` may be called more than once. Only the first invocation will configure
    the ``kwlist`` logger unless ``force_reload=True``, in which case the handler
    installed by a previous call is replaced.
    """
    global _is_initialized

    with _INIT_LOCK:
        if _is_initialized and not force_reload:
            return

        logconfig.configure_root_logger(level=level, replace=True)
        _is_initialized = True
