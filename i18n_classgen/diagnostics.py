import logging
from dataclasses import dataclass, field
from typing import List, Optional

NOTE = "note"
WARNING = "warning"
ERROR = "error"

_LOG_LEVELS = {
    NOTE: logging.INFO,
    WARNING: logging.WARNING,
    ERROR: logging.ERROR,
}


@dataclass(frozen=True)
class Diagnostic:
    kind: str
    message: str
    source: Optional[str] = None

    def __str__(self) -> str:
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


@dataclass
class Diagnostics:
    """
    Collects notes, warnings and errors produced during one generation pass.

    Components record into the collector they are handed; the driver drains it
    into the application logger once an interface has been processed.
    """
    entries: List[Diagnostic] = field(default_factory=list)

    def note(self, message: str, source: Optional[str] = None) -> None:
        self.entries.append(Diagnostic(NOTE, message, source))

    def warn(self, message: str, source: Optional[str] = None) -> None:
        self.entries.append(Diagnostic(WARNING, message, source))

    def error(self, message: str, source: Optional[str] = None) -> None:
        self.entries.append(Diagnostic(ERROR, message, source))

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.entries if d.kind == WARNING]

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.entries if d.kind == ERROR]

    def drain(self) -> List[Diagnostic]:
        """Return every collected entry and reset the collector."""
        drained = self.entries
        self.entries = []
        return drained

    def drain_to(self, logger: logging.Logger) -> List[Diagnostic]:
        """
        Log and reset every collected entry.

        Args:
            logger: The logger receiving the entries.

        Returns:
            The drained entries, in the order they were recorded.
        """
        drained = self.drain()
        for diagnostic in drained:
            logger.log(_LOG_LEVELS.get(diagnostic.kind, logging.INFO), "%s", diagnostic)
        return drained
