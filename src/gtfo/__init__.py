__version__ = "0.1.0"

__all__ = [
    "__version__",
    "cli",
    "config",
    "core",
    "formatter",
    "module",
    "parser",
    "runtime",
]
