"""Selection link - the subject used to filter the entry list."""

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

SubjectListener = Callable[[str | None], None]


class SelectionLink:
    """Holds the selected subject and notifies listeners when it changes.

    The controller owns the value; presenters request changes through `select`.
    """

    def __init__(self, subject: str | None = None) -> None:
        self._subject = subject
        self._listeners: list[SubjectListener] = []

    @property
    def selected_subject(self) -> str | None:
        return self._subject

    def subscribe(self, listener: SubjectListener) -> Callable[[], None]:
        """Register a change listener. Returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def select(self, subject: str | None) -> bool:
        """Set the subject. Returns False when the value did not change."""
        if subject == self._subject:
            return False
        self._subject = subject
        logger.debug("Selected subject changed to %r", subject)
        for listener in list(self._listeners):
            listener(subject)
        return True

    def clear(self) -> bool:
        return self.select(None)
