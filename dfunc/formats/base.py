"""Abstract base class for structure file formats."""

from abc import ABC, abstractmethod
from typing import Any


class StructureFormat(ABC):
    """Parser turning document text into a nested structure."""

    name: str

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Parse text into mappings, sequences and leaf values.

        Args:
            text: Complete document contents

        Returns:
            The parsed structure

        Raises:
            ValueError: If the text is not a valid document for this format

        """
