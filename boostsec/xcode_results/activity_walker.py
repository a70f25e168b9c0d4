"""Depth-first walk of test activities into a step tree with rolled-up status."""

from collections.abc import Sequence
from pathlib import Path, PurePath

from boostsec.xcode_results.models.test_result import Attachment, Status, Step
from boostsec.xcode_results.models.test_tree import Activity
from boostsec.xcode_results.time_utils import time_window
from boostsec.xcode_results.visitor import ResultsVisitor


ASSERTION_FAILURE_TYPE = "com.apple.dt.xctest.activity-type.testAssertionFailure"


def combine_status(aggregate: Status, status: Status) -> Status:
    """Fold one sibling status into an aggregate under FAILED > BROKEN > PASSED."""
    if status == Status.FAILED:
        return Status.FAILED
    if status == Status.BROKEN and aggregate != Status.FAILED:
        return Status.BROKEN
    return aggregate


def resolve_attachment_path(attachments_dir: Path, filename: str) -> Path | None:
    """Return the attachment path if it names an existing file inside the directory."""
    relative = PurePath(filename)
    if not filename or relative.is_absolute() or ".." in relative.parts:
        return None
    try:
        path = attachments_dir / relative
        return path if path.is_file() else None
    except (OSError, ValueError):
        return None


class ActivityWalker:
    """Converts the activities of one test case into steps."""

    def __init__(self, attachments_dir: Path, visitor: ResultsVisitor) -> None:
        """Initialize walker for the attachments of one summary file."""
        self.attachments_dir = attachments_dir
        self.visitor = visitor

    def walk(
        self, activities: Sequence[Activity], failure_sink: list[Step]
    ) -> tuple[Status, list[Step]]:
        """Walk sibling activities, recursing into their sub-activities first.

        Args:
            activities: Sibling activities in recorded order
            failure_sink: Shared list receiving every failing step of the test,
                in encounter order

        Returns:
            Tuple of (rolled-up status of the siblings, their steps)

        """
        aggregate = Status.PASSED
        steps: list[Step] = []

        for activity in activities:
            finish = activity.finish if activity.finish is not None else activity.start
            duration = (
                finish - activity.start
                if activity.start is not None and finish is not None
                else None
            )
            time = time_window(activity.start, duration)

            child_status, child_steps = self.walk(activity.sub_activities, failure_sink)

            step = Step(
                name=activity.title,
                uuid=activity.uuid,
                time=time,
                steps=child_steps,
            )

            if activity.diagnostic_report_file_name is not None:
                step.status = Status.FAILED
                step.status_message = activity.title
                failure_sink.append(step)
            elif activity.activity_type == ASSERTION_FAILURE_TYPE:
                step.status = combine_status(Status.BROKEN, child_status)
                step.status_message = activity.title
                failure_sink.append(step)
            elif child_steps:
                step.status = child_status
            else:
                step.status = Status.PASSED

            step.attachments = self._resolve_attachments(activity.attachments)
            steps.append(step)
            aggregate = combine_status(aggregate, step.status)

        return aggregate, steps

    def _resolve_attachments(self, filenames: Sequence[str]) -> list[Attachment]:
        attachments: list[Attachment] = []
        for filename in filenames:
            path = resolve_attachment_path(self.attachments_dir, filename)
            if path is None:
                continue
            attachments.append(self.visitor.visit_attachment_file(path))
        return attachments
