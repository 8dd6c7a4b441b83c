from dataclasses import dataclass

from .core.model import NotesDocument


@dataclass(frozen=True)
class ChecklistStats:
    total: int
    completed: int

    @property
    def percent(self) -> int:
        if self.total == 0:
            return 0
        return round(self.completed / self.total * 100)

    @property
    def is_complete(self) -> bool:
        return self.total > 0 and self.completed == self.total

    def as_dict(self) -> dict[str, int]:
        return {"total": self.total, "completed": self.completed}


def get_checklist_stats(doc: NotesDocument) -> ChecklistStats:
    """Count checklist blocks and how many of them are checked.

    Goes by the type tag, so stored checklist entries kept verbatim count
    too; only a JSON ``true`` marks one completed.
    """
    checklists = [b for b in doc.blocks if b.type == "checklist"]
    return ChecklistStats(
        total=len(checklists),
        completed=sum(1 for b in checklists if b.checked is True),
    )
