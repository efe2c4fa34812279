"""BaseAgent interface for all assistant agents."""
from abc import ABC, abstractmethod
from typing import Optional

from ..data.catalog_view import CatalogView
from ..schemas.io_models import AgentResult

class BaseAgent(ABC):
    name: str = "base"
    intent: str = "base"

    @abstractmethod
    def handle(self, query: str, catalog: CatalogView) -> Optional[AgentResult]:
        """Return the answer text, or None to let the next rule try."""
        ...

    def _ok(self, text: str) -> AgentResult:
        return AgentResult(agent=self.name, intent=self.intent, text=text)
