from abc import ABC, abstractmethod


class IClient(ABC):
    """Common interface for the clients exposed by this package"""

    @abstractmethod
    def get_client(self) -> object:
        """Return the object that performs the underlying calls"""
        raise NotImplementedError()
