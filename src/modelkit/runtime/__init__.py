"""Runtime helpers for driving models outside an event loop."""

from modelkit.runtime.sync import run_sync

__all__ = [
    "run_sync",
]
