"""Abstract contract every layout participant implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

from .measure import Measure
from .prop import Prop


class RawWidget(ABC):
    """Anything that takes part in a layout.

    ``measures`` lists the values the widget wants resolved, in the order
    ``paint`` receives them. ``constraints`` lists the propositions the widget
    structurally requires (possibly none). ``paint`` is called once after a
    successful solve; raising from it aborts the remaining dispatch.
    """

    @abstractmethod
    def measures(self) -> List[Measure]:
        raise NotImplementedError

    @abstractmethod
    def constraints(self) -> List[Prop]:
        raise NotImplementedError

    @abstractmethod
    def paint(self, values: Sequence[float]) -> None:
        raise NotImplementedError
