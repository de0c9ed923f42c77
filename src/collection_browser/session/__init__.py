"""Search session state and input debouncing."""

from collection_browser.session.debounce import SearchDebouncer
from collection_browser.session.search import (
    ChangeListener,
    SearchSession,
    SessionPhase,
)

__all__ = [
    "ChangeListener",
    "SearchDebouncer",
    "SearchSession",
    "SessionPhase",
]
