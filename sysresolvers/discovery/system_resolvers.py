from abc import ABC, abstractmethod


class SystemResolvers(ABC):
    """
    Addresses of the resolvers the operating system would query.

    One concrete variant exists per platform family. Callers own the
    refresh schedule: ``refresh_interval`` is carried for them, and no
    implementation runs a timer of its own.
    """

    @property
    @abstractmethod
    def refresh_interval(self) -> float:
        """Seconds between refreshes requested at construction."""

    @abstractmethod
    async def refresh(self) -> None:
        """Rediscover the system resolvers, raising RefreshError on failure."""

    @abstractmethod
    def get(self) -> list[str]:
        """Return the currently known resolver addresses."""
