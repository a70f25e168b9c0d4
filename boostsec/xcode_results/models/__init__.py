"""Data models for test documents, results, and reader configuration."""

from boostsec.xcode_results.models.reader_config import ReaderConfig
from boostsec.xcode_results.models.test_result import (
    Attachment,
    Label,
    StageResult,
    Status,
    Step,
    TestResult,
    TimeWindow,
)
from boostsec.xcode_results.models.test_tree import (
    Activity,
    FailureSummary,
    TestableSummary,
    TestCase,
    TestDocument,
    TestGroup,
    TestNode,
    UnrecognizedNode,
)

__all__ = [
    "Activity",
    "Attachment",
    "FailureSummary",
    "Label",
    "ReaderConfig",
    "StageResult",
    "Status",
    "Step",
    "TestCase",
    "TestDocument",
    "TestGroup",
    "TestNode",
    "TestResult",
    "TestableSummary",
    "TimeWindow",
    "UnrecognizedNode",
]
