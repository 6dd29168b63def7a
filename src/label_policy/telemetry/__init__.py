from .logger import PolicyLogger, init_logging

__all__ = [
    "PolicyLogger",
    "init_logging",
]
