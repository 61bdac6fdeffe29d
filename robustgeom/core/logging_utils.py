"""Logging utilities for robustgeom.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All robustgeom code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')
_ROOT_NAME = 'robustgeom'


def _ensure_package_root() -> logging.Logger:
    """Ensure the 'robustgeom' logger has a single stream handler and is
    isolated from the process root logger. Returns the 'robustgeom' logger.
    """
    pkg_root = logging.getLogger(_ROOT_NAME)
    # Only NullHandlers (added by the package __init__) count as "unconfigured"
    has_non_null = any(not isinstance(h, logging.NullHandler) for h in pkg_root.handlers)
    if not has_non_null:
        for h in list(pkg_root.handlers):
            pkg_root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        pkg_root.addHandler(handler)
    pkg_root.propagate = False
    return pkg_root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[str, int] = 'INFO') -> None:
    """Attach a stdout handler to the 'robustgeom' logger family and set its level.

    This does NOT modify the process root logger.
    """
    pkg_root = _ensure_package_root()
    pkg_root.setLevel(_to_level(level))


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'robustgeom' namespace.

    Library modules call this at import time, so it must not install handlers:
    until configure_logging() runs, records only reach the package NullHandler
    (or whatever the application attached). Without an explicit level the
    logger is NOTSET and inherits from the 'robustgeom' parent.
    """
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + '.'):
        name = f'{_ROOT_NAME}.{name}'
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
