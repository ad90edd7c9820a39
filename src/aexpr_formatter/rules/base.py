from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..models import FormattingOptions


@dataclass
class FormattingContext:
    source: str
    options: FormattingOptions


class BaseFormattingRule(ABC):
    """One ordered pass over the whole text."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    def enabled(self, options: FormattingOptions) -> bool:
        """Option gate; unconditional passes keep the default."""
        return True

    @abstractmethod
    def apply(self, context: FormattingContext) -> None:
        """Apply the formatting rule to the context."""
        pass
