"""EXT_bim4d_metadata: construction schedule (4D BIM) attached to a node.

A node carries the work items that build it, each with a planned or actual
time span and a progress measure, and optionally names the one currently in
progress.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from gltfext.codec import box
from gltfext.extensions.base import ExtensionModel, JsonModel, UInt32, defaulted
from gltfext.registry import ParentKind

EXTENSION_NAME = "EXT_bim4d_metadata"
DEFAULT_VERSION = "1.0"


class WorkStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class GenerateType(str, Enum):
    AUTO = "auto"
    MANUAL = "manual"


class WorkType(str, Enum):
    SCHEDULE = "schedule"
    PLAN = "plan"


class ProgressType(str, Enum):
    PERCENTAGE = "percentage"
    ABSOLUTE = "absolute"


class WorkItem(JsonModel):
    """One scheduled task.

    Times are kept as the strings found in the file.  ``scheduleStart`` and
    ``scheduleEnd`` fall back to ``startTime`` and ``endTime``.
    """

    status: WorkStatus | None = defaulted(WorkStatus.PENDING)
    generate_type: GenerateType | None = defaulted(GenerateType.AUTO)
    work_type: WorkType | None = defaulted(WorkType.SCHEDULE)
    progress_type: ProgressType | None = defaulted(ProgressType.PERCENTAGE)
    total: float | None = defaulted(100.0)
    start_value: float | None = defaulted(0.0)
    end_value: float | None = defaulted(0.0)

    id: str
    name: str
    start_time: str
    end_time: str
    description: str | None = None
    schedule_start: str | None = None
    schedule_end: str | None = None
    metadata: dict[str, Any] | None = None
    metadata_buffer_view: UInt32 | None = None

    def description_or_default(self) -> str:
        return self.description if self.description is not None else ""

    def schedule_start_or_default(self) -> str:
        return self.schedule_start if self.schedule_start is not None else self.start_time

    def schedule_end_or_default(self) -> str:
        return self.schedule_end if self.schedule_end is not None else self.end_time

    def progress(self) -> float:
        """Return progress as a percentage.

        Percentage items report ``startValue`` as is; absolute items report
        ``startValue`` relative to ``total`` (0 when ``total`` is 0).
        """
        if self.value_or_default("progress_type") == ProgressType.PERCENTAGE:
            return self.value_or_default("start_value")
        total = self.value_or_default("total")
        if total == 0:
            return 0.0
        return self.value_or_default("start_value") / total * 100.0


class Bim4dMetadata(ExtensionModel):
    """Node-level payload: the work items that build the node."""

    extension_name: ClassVar[str] = EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.NODE

    version: str | None = defaulted(DEFAULT_VERSION)
    works: list[WorkItem] | None = None
    current_work_id: str | None = None

    def add_work(self, work: WorkItem) -> int:
        """Append a work item and return its index."""
        if self.works is None:
            self._assign("works", [work])
        else:
            self.works.append(work)
        return len(self.works) - 1

    def set_current_work(self, work_id: str) -> None:
        self._assign("current_work_id", box(work_id))

    def current_work(self) -> WorkItem | None:
        """Return the work item named by ``currentWorkId``, if present."""
        if self.current_work_id is None:
            return None
        for work in self.works or []:
            if work.id == self.current_work_id:
                return work
        return None


def validate_work_item(work: WorkItem) -> list[str]:
    """Check the scheduling rules decoding does not enforce.

    Returns a list of problems, empty when *work* passes.
    """
    problems: list[str] = []
    for label, value in (
        ("work item ID", work.id),
        ("work item name", work.name),
        ("start time", work.start_time),
        ("end time", work.end_time),
    ):
        if not value:
            problems.append(f"{label} is required")
    if work.value_or_default("start_value") < 0:
        problems.append("start value cannot be negative")
    if work.value_or_default("end_value") < 0:
        problems.append("end value cannot be negative")
    if work.value_or_default("total") <= 0:
        problems.append("total must be positive")
    return problems
