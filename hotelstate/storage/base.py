"""Interface for wherever the encoded hotel text lives."""

from abc import ABC, abstractmethod


class TextStorage(ABC):
    """Reads and writes the whole encoded text at once."""

    @abstractmethod
    def read_text(self) -> str:
        """Return the stored text.

        Raises:
            StorageError: If the text cannot be read
        """

    @abstractmethod
    def write_text(self, text: str) -> str:
        """Store the text, replacing any previous content.

        Returns:
            Location the text was written to

        Raises:
            StorageError: If the text cannot be written
        """
