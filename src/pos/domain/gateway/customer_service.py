"""Port for the external customer service."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.product import Customer


class CustomerService(ABC):

    @abstractmethod
    def get_all(self, limit: int = 100) -> list[Customer]:
        """Return up to *limit* customers.

        Raises ServiceError if the customer list cannot be fetched.
        """
