"""Value serializer interface.

Structural assertions compare composite values through a canonical string form.
The serializer producing that form is injected into the assertion suite so the
walker can be configured without touching the domain.
"""

import abc
from typing import Any

# pylint: disable=too-few-public-methods


class Serializer(abc.ABC):
    """Interface for turning arbitrary values into canonical strings."""

    @abc.abstractmethod
    def dumps(self, value: Any) -> str:
        """Serialize a value.

        Args:
            value: Value to serialize. May be a primitive or a composite.

        Returns:
            The canonical string form. Equal structures must serialize to
            equal strings.
        """
