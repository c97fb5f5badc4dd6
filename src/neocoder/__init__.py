"""In-memory code editing engine with search, replace, and auto-indent."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "config",
    "runtime",
    "session",
    "workspace",
]

__version__ = "0.1.0"
