"""The outcome of a prompt and the symbol shown for it."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from termwidgets.text import Span


class Status(Enum):
    """The result of a prompt; ``PENDING`` until it is completed or aborted."""

    PENDING = "pending"
    ABORTED = "aborted"
    DONE = "done"

    def is_pending(self) -> bool:
        return self is Status.PENDING

    def is_aborted(self) -> bool:
        return self is Status.ABORTED

    def is_done(self) -> bool:
        return self is Status.DONE

    def is_finished(self) -> bool:
        return self in (Status.DONE, Status.ABORTED)

    def symbol(self) -> Span:
        symbols = Symbols()
        return {
            Status.PENDING: symbols.pending,
            Status.ABORTED: symbols.aborted,
            Status.DONE: symbols.done,
        }[self]


@dataclass(frozen=True)
class Symbols:
    """The styled symbol shown for each status."""

    pending: Span = field(default_factory=lambda: Span("?").cyan())
    aborted: Span = field(default_factory=lambda: Span("✘").red())
    done: Span = field(default_factory=lambda: Span("✔").green())