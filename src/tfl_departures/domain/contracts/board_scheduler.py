"""Protocol for the board scheduler."""

from typing import Protocol


class BoardSchedulerProtocol(Protocol):
    """Protocol for the poll and tick timers that drive the board."""

    @property
    def is_running(self) -> bool:
        """Whether the timers are active."""
        ...

    async def start(self) -> None:
        """Start both timers."""
        ...

    async def stop(self) -> None:
        """Stop both timers and any in-flight poll."""
        ...
