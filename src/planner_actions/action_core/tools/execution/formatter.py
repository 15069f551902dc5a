"""Bounding and summarizing tool results."""

from typing import Any, Dict, List

from ...config import DEFAULT_MAX_OUTPUT_CHARS
from ..models import ActionBatch

TRUNCATION_MARKER = "\n\n[... output truncated ...]\n\n"


class ResultFormatter:
    """Keeps tool output within a fixed size and builds audit summaries of a batch."""

    def __init__(self, max_output_chars: int = DEFAULT_MAX_OUTPUT_CHARS) -> None:
        """
        Args:
            max_output_chars: Maximum length of the content handed back for one call.
        """
        if max_output_chars <= len(TRUNCATION_MARKER):
            raise ValueError(f"max_output_chars must be larger than {len(TRUNCATION_MARKER)}.")
        self.max_output_chars = max_output_chars

    def truncate(self, content: str) -> str:
        """Bound ``content`` to ``max_output_chars``.

        Content that fits is returned unchanged. Longer content keeps its beginning
        and its end around an explicit truncation marker, and the result is exactly
        ``max_output_chars`` long, so truncating it again is a no-op.

        Args:
            content: Raw tool output.

        Returns:
            The bounded content.
        """
        if len(content) <= self.max_output_chars:
            return content

        budget = self.max_output_chars - len(TRUNCATION_MARKER)
        head = budget // 2
        tail = budget - head
        return f"{content[:head]}{TRUNCATION_MARKER}{content[len(content) - tail:]}"

    @staticmethod
    def summarize(batch: ActionBatch) -> List[Dict[str, Any]]:
        """Build one audit record per call, in request order.

        Args:
            batch: The calls of a batch paired with their results.

        Returns:
            ``{"tool_call_id", "name", "status"}`` records.
        """
        return [
            {"tool_call_id": result.correlation_id, "name": result.name, "status": result.status}
            for _, result in batch.pairs()
        ]
