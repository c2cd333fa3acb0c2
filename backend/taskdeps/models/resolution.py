from pydantic import BaseModel, ConfigDict


class Resolution(BaseModel):
    """Outcome of one layered resolution run.

    ``order`` is the flat sequence; ``waves`` holds the same ids grouped by the
    round in which they became eligible. When ``complete`` is false the order is
    partial and ``unresolved`` lists what was left behind, in input order.
    """

    model_config = ConfigDict(frozen=True)

    order: list[str] = []
    waves: list[list[str]] = []
    complete: bool = True
    unresolved: list[str] = []
    cycle: list[str] | None = None
    duplicate_ids: list[str] = []

    @property
    def stalled(self) -> bool:
        """True when unresolved tasks remain (cycle or dangling dependency)."""
        return not self.complete
