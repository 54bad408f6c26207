# gplite/config.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import os
import logging

_SUPPORTED_BACKENDS = ("numpy",)

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"

class _GPLiteConfig:
    def __init__(self):
        self.version = __version__
        self.backend = None
        self.dtype_resolved = None
        # logger lives in config
        self.logger = logging.getLogger("gplite")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(logging.WARNING)

    def __str__(self):
        return (
            f"GPLiteConfig("
            f"version={self.version}, "
            f"backend={self.backend}, "
            f"dtype={self.dtype_resolved})"
        )

    def __repr__(self):
        return (
            f"<GPLiteConfig "
            f"version={self.version!r}, "
            f"backend={self.backend!r}, "
            f"dtype={self.dtype_resolved!r}>"
        )

_config = _GPLiteConfig()

def get_config():
    return _config

def _detect_backend():
    env = os.environ.get("GPLITE_BACKEND")
    if env:
        return env
    return "numpy"

def init_backend():
    """Idempotent. Detect and store backend, set env for downstream imports."""
    if _config.backend is None:
        backend = _detect_backend()
        _config.backend = backend
        os.environ["GPLITE_BACKEND"] = backend
    return _config.backend

def set_backend(backend: str):
    """Force a backend before importing gplite.num."""
    if backend not in _SUPPORTED_BACKENDS:
        raise ValueError(f"backend must be one of {_SUPPORTED_BACKENDS}")
    _config.backend = backend
    os.environ["GPLITE_BACKEND"] = backend

def get_backend():
    """Return current backend; triggers detection if not set."""
    return _config.backend or init_backend()

def get_logger():
    return _config.logger

def set_log_level(level):
    _config.logger.setLevel(level)
