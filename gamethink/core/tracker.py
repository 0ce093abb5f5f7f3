"""Thought record validation, accumulation and branch tracking."""
import json
import math
import sys
from typing import Any, Dict, List, Mapping, Optional, TextIO, Tuple

from gamethink.core.formatter import ThoughtFormatter
from gamethink.models.internal import (
    FailureSummary,
    Invalid,
    ThoughtRecord,
    ThoughtSummary,
    Valid,
    ValidationOutcome,
)
from gamethink.models.protocol import ToolCallResponse
from gamethink.utils.logging import get_logger

logger = get_logger(__name__)


def _is_number(value: Any) -> bool:
    """Non-zero finite int or float; bools, NaN and infinities are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, float) and not math.isfinite(value):
        return False
    return value != 0


def validate_thought_data(raw: Any) -> ValidationOutcome:
    """Check the required fields in order and stop at the first failure.

    Optional fields are passed through untouched.
    """
    data: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}

    thought = data.get("thought")
    if not isinstance(thought, str) or not thought:
        return Invalid(reason="Invalid thought: must be a string")
    if not _is_number(data.get("thoughtNumber")):
        return Invalid(reason="Invalid thoughtNumber: must be a number")
    if not _is_number(data.get("totalThoughts")):
        return Invalid(reason="Invalid totalThoughts: must be a number")
    if not isinstance(data.get("nextThoughtNeeded"), bool):
        return Invalid(reason="Invalid nextThoughtNeeded: must be a boolean")

    return Valid(record=ThoughtRecord(
        thought=thought,
        thoughtNumber=data["thoughtNumber"],
        totalThoughts=data["totalThoughts"],
        nextThoughtNeeded=data["nextThoughtNeeded"],
        isRevision=data.get("isRevision"),
        revisesThought=data.get("revisesThought"),
        branchFromThought=data.get("branchFromThought"),
        branchId=data.get("branchId"),
        gameComponent=data.get("gameComponent"),
        libraryUsed=data.get("libraryUsed"),
    ))


class ThoughtTracker:
    """Append-only thought history with a branch index.

    Not synchronised: callers that can reach it concurrently must serialize
    calls to ``record_thought`` themselves.
    """

    def __init__(
        self,
        formatter: Optional[ThoughtFormatter] = None,
        diagnostics: Optional[TextIO] = None,
        render: bool = True,
    ):
        """Initialize an empty tracker.

        ``diagnostics`` defaults to the current ``sys.stderr``.
        """
        self.formatter = formatter or ThoughtFormatter()
        self.diagnostics = diagnostics
        self.render = render
        self._history: List[ThoughtRecord] = []
        self._branches: Dict[str, List[ThoughtRecord]] = {}

    @property
    def history(self) -> Tuple[ThoughtRecord, ...]:
        return tuple(self._history)

    @property
    def branches(self) -> Dict[str, Tuple[ThoughtRecord, ...]]:
        return {key: tuple(records) for key, records in self._branches.items()}

    @property
    def history_length(self) -> int:
        return len(self._history)

    @property
    def branch_ids(self) -> List[str]:
        return list(self._branches)

    def record_thought(self, raw: Any) -> ToolCallResponse:
        """Validate, store and summarize one thought. Never raises."""
        outcome = validate_thought_data(raw)
        if isinstance(outcome, Invalid):
            logger.info(
                "thought_rejected",
                reason=outcome.reason,
                history_length=len(self._history),
            )
            failure = FailureSummary(error=outcome.reason)
            return ToolCallResponse.text(
                json.dumps(failure.model_dump(), indent=2),
                is_error=True,
            )

        record = outcome.record
        if record.thought_number > record.total_thoughts:
            record.total_thoughts = record.thought_number

        self._history.append(record)
        branch_key = record.branch_key
        if branch_key is not None:
            self._branches.setdefault(branch_key, []).append(record)

        logger.info(
            "thought_recorded",
            thought_number=record.thought_number,
            total_thoughts=record.total_thoughts,
            branch=branch_key,
            history_length=len(self._history),
        )
        self._emit(record)

        summary = ThoughtSummary(
            thoughtNumber=record.thought_number,
            totalThoughts=record.total_thoughts,
            nextThoughtNeeded=record.next_thought_needed,
            gameComponent=record.game_component,
            libraryUsed=record.library_used,
            branches=list(self._branches),
            thoughtHistoryLength=len(self._history),
        )
        return ToolCallResponse.text(json.dumps(summary.to_payload(), indent=2, default=str))

    def _emit(self, record: ThoughtRecord) -> None:
        """Write the rendered record to the diagnostic stream."""
        if not self.render:
            return
        stream = self.diagnostics if self.diagnostics is not None else sys.stderr
        try:
            stream.write(self.formatter.render(record) + "\n")
            stream.flush()
        except (OSError, ValueError) as e:
            logger.warning("diagnostic_write_failed", error=str(e))
