from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["FilterGraphObject"]


class FilterGraphObject(ABC):
    """common base of Filter, Chain, and Graph"""

    @abstractmethod
    def compose(self) -> str:
        """compose FFmpeg filtergraph expression"""

    @abstractmethod
    def get_num_chains(self) -> int:
        """get the number of chains"""

    @abstractmethod
    def get_num_filters(self) -> int:
        """get the total number of filters across all chains"""

    def __str__(self) -> str:
        return self.compose()
