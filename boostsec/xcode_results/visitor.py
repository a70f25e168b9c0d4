"""Receivers for converted test results and their attachment files."""

import logging
import shutil
import uuid
from abc import ABC, abstractmethod
from pathlib import Path

from boostsec.xcode_results.models.test_result import Attachment, TestResult

logger = logging.getLogger(__name__)


class ResultsVisitor(ABC):
    """Abstract receiver of converted results."""

    @abstractmethod
    def visit_test_result(self, result: TestResult) -> None:
        """Accept one finished test result.

        Args:
            result: Fully assembled result; called once per test case

        """

    @abstractmethod
    def visit_attachment_file(self, path: Path) -> Attachment:
        """Accept one existing attachment file.

        Args:
            path: Attachment file on disk

        Returns:
            Handle embedded in the step that declared the attachment

        """


class InMemoryResultsVisitor(ResultsVisitor):
    """Collects results and attachment handles in memory."""

    def __init__(self) -> None:
        """Initialize empty collections."""
        self.results: list[TestResult] = []
        self.attachments: list[Attachment] = []

    def visit_test_result(self, result: TestResult) -> None:
        """Store the result."""
        self.results.append(result)

    def visit_attachment_file(self, path: Path) -> Attachment:
        """Record the file without copying it."""
        attachment = Attachment(
            uid=str(uuid.uuid4()),
            name=path.name,
            source=str(path),
            size=path.stat().st_size,
            original_path=path,
        )
        self.attachments.append(attachment)
        return attachment


class AllureResultsWriter(ResultsVisitor):
    """Writes results as Allure-style JSON files and copies attachments.

    Each result becomes ``<uuid>-result.json`` and each attachment is copied
    to ``<uuid>-attachment<suffix>`` inside the output directory.
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize writer, creating the output directory if needed."""
        self.output_dir = output_dir
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.results: list[TestResult] = []

    def visit_test_result(self, result: TestResult) -> None:
        """Serialize the result to its own JSON file."""
        result_file = self.output_dir / f"{uuid.uuid4()}-result.json"
        result_file.write_text(
            result.model_dump_json(by_alias=True, exclude_none=True, indent=2)
        )
        logger.debug(f"Wrote {result_file}")
        self.results.append(result)

    def visit_attachment_file(self, path: Path) -> Attachment:
        """Copy the file into the output directory."""
        uid = str(uuid.uuid4())
        source = f"{uid}-attachment{path.suffix}"
        shutil.copyfile(path, self.output_dir / source)
        return Attachment(
            uid=uid,
            name=path.name,
            source=source,
            size=path.stat().st_size,
            original_path=path,
        )
