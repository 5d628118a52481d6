"""Shell chrome the coordinator drives: the modal navigation drawer."""

from dataclasses import dataclass


@dataclass(slots=True)
class Drawer:
    """Modal navigation drawer. Closed on every page change."""

    open: bool = False

    def close(self) -> None:
        self.open = False

    def toggle(self) -> None:
        self.open = not self.open
