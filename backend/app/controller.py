"""Chat controller: remote model first, deterministic fallback second.

Whatever produces the answer, the caller sees the same contract: a sequence of
server-sent ``data: {"content": ...}`` frames closed by ``data: {"done": true}``.
"""
import json
from typing import Iterator, Optional, Sequence

from .config import Config
from .fallback import generate_response
from .generate import GenerationClient
from .prompt_builder import PromptBuilder
from ..schemas.catalog_models import BranchDetail, ItemOut
from ..utils.logger import get_logger

logger = get_logger()


def sse(payload: dict) -> str:
    return f"data: {json.dumps(payload, ensure_ascii=False)}\n\n"

DONE_FRAME = sse({"done": True})


class ChatController:
    def __init__(self, client: Optional[GenerationClient] = None, builder: Optional[PromptBuilder] = None,
                 use_llm: Optional[bool] = None):
        self.client = client or GenerationClient()
        self.builder = builder or PromptBuilder()
        self.use_llm = Config.has_llm() if use_llm is None else use_llm

    def fallback_frames(self, message: str, branch: Optional[BranchDetail], items: Sequence[ItemOut]) -> Iterator[str]:
        text = generate_response(message, branch, items)
        logger.info(f"[CHAT] Fallback response (first 100 chars): {text[:100]!r}")
        for line in text.split("\n"):
            if line.strip():
                yield sse({"content": line + "\n"})

    def stream(self, message: str, branch: Optional[BranchDetail], items: Sequence[ItemOut]) -> Iterator[str]:
        """Yield SSE frames answering ``message`` for the branch snapshot."""
        branch_id = branch.id if branch else None
        logger.info(f"[CHAT] Received: message={message!r}, branchId={branch_id}")

        if self.use_llm:
            prompt = self.builder.build_prompt(branch, message)
            try:
                for content in self.client.stream_answer(prompt):
                    yield sse({"content": content})
                yield DONE_FRAME
                return
            except Exception as e:
                # partial remote output is abandoned; the full fallback follows
                logger.warning(f"[CHAT] Assistant model failed, using fallback: {e}")

        yield from self.fallback_frames(message, branch, items)
        yield DONE_FRAME
