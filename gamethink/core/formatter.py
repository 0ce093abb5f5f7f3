"""Bordered text rendering of thought records for the diagnostic channel."""
from typing import List
from gamethink.models.internal import ThoughtRecord


class ThoughtFormatter:
    """Render a thought record as a framed block."""

    def __init__(self, margin: int = 4):
        self.margin = margin

    def header(self, record: ThoughtRecord) -> str:
        """Category label, position, context and tag annotations."""
        if record.is_revision:
            prefix = "🎮 Revision"
            context = f" (revising thought {record.revises_thought})"
        elif record.branch_from_thought:
            prefix = "🎲 Branch"
            context = f" (from thought {record.branch_from_thought}, ID: {record.branch_id})"
        else:
            prefix = "🕹️ Design"
            context = ""

        parts = [f"{prefix} {record.thought_number}/{record.total_thoughts}{context}"]
        if record.game_component:
            parts.append(f"[{record.game_component}]")
        if record.library_used:
            parts.append(f"<{record.library_used}>")
        return " ".join(parts)

    def render(self, record: ThoughtRecord) -> str:
        header = self.header(record)
        lines = record.thought.splitlines() or [record.thought]
        width = max(len(header), *(len(line) for line in lines)) + self.margin
        border = "─" * width
        inner = width - 2

        rows: List[str] = [
            f"┌{border}┐",
            f"│ {header.ljust(inner)} │",
            f"├{border}┤",
        ]
        rows.extend(f"│ {line.ljust(inner)} │" for line in lines)
        rows.append(f"└{border}┘")
        return "\n".join(rows)
