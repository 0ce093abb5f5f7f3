"""Internal data structures for the thought tracker."""
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class ThoughtRecord(BaseModel):
    """A single game design thought."""
    model_config = ConfigDict(populate_by_name=True)

    thought: str
    thought_number: Union[int, float] = Field(alias="thoughtNumber")
    total_thoughts: Union[int, float] = Field(alias="totalThoughts")
    next_thought_needed: bool = Field(alias="nextThoughtNeeded")

    # Stored exactly as received
    is_revision: Any = Field(default=None, alias="isRevision")
    revises_thought: Any = Field(default=None, alias="revisesThought")
    branch_from_thought: Any = Field(default=None, alias="branchFromThought")
    branch_id: Any = Field(default=None, alias="branchId")
    game_component: Any = Field(default=None, alias="gameComponent")
    library_used: Any = Field(default=None, alias="libraryUsed")

    @property
    def branch_key(self) -> Optional[str]:
        """Branch index key, or None when the record does not start a branch."""
        if not (self.branch_from_thought and self.branch_id):
            return None
        return self.branch_id if isinstance(self.branch_id, str) else str(self.branch_id)


class Valid(BaseModel):
    """Validation passed."""
    ok: bool = True
    record: ThoughtRecord


class Invalid(BaseModel):
    """Validation failed on the first offending field."""
    ok: bool = False
    reason: str


ValidationOutcome = Union[Valid, Invalid]


class ThoughtSummary(BaseModel):
    """Payload returned after a thought is recorded."""
    model_config = ConfigDict(populate_by_name=True)

    thought_number: Union[int, float] = Field(alias="thoughtNumber")
    total_thoughts: Union[int, float] = Field(alias="totalThoughts")
    next_thought_needed: bool = Field(alias="nextThoughtNeeded")
    game_component: Any = Field(default=None, alias="gameComponent")
    library_used: Any = Field(default=None, alias="libraryUsed")
    branches: List[str] = Field(default_factory=list)
    thought_history_length: int = Field(alias="thoughtHistoryLength")

    def to_payload(self) -> Dict[str, Any]:
        """Wire form, omitting unset domain tags."""
        return self.model_dump(by_alias=True, exclude_none=True)


class FailureSummary(BaseModel):
    """Payload returned when a thought is rejected."""
    error: str
    status: str = "failed"
