# supergrid/translation/base.py

from abc import ABC, abstractmethod
from typing import Any


class OutputTranslator(ABC):
    """
    Abstract base class for translating model-specific outputs to a results record.
    """
    def __init__(self, model_output: Any):
        self.model_output = model_output

    @abstractmethod
    def translate(self) -> Any:
        """Translate model output to the standardized results record."""
        pass
