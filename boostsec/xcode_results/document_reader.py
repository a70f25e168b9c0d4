"""Convert a parsed TestSummaries property list into the typed test tree."""

from pathlib import Path

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
from boostsec.xcode_results.plist_document import BundleReadError, PlistNode, load_plist

GROUP_OBJECT_CLASS = "IDESchemeActionTestSummaryGroup"
TEST_OBJECT_CLASS = "IDESchemeActionTestSummary"


def read_document(path: Path, max_depth: int = 256) -> TestDocument:
    """Load and convert one TestSummaries file.

    Args:
        path: Property-list file to read
        max_depth: Deepest allowed nesting of groups or activities

    Returns:
        Typed document

    Raises:
        BundleReadError: If the file cannot be parsed or nests too deeply

    """
    return convert_document(load_plist(path), max_depth)


def convert_document(root: PlistNode, max_depth: int = 256) -> TestDocument:
    """Convert a root node into a TestDocument."""
    return TestDocument(
        summaries=tuple(
            _convert_summary(summary, max_depth)
            for summary in root.get_list("TestableSummaries")
        )
    )


def _convert_summary(node: PlistNode, max_depth: int) -> TestableSummary:
    return TestableSummary(
        name=node.get_string("TestName"),
        tests=tuple(
            _convert_test_node(test, 1, max_depth) for test in node.get_list("Tests")
        ),
    )


def _check_depth(depth: int, max_depth: int) -> None:
    if depth > max_depth:
        raise BundleReadError(f"Document nesting exceeds maximum depth of {max_depth}")


def _convert_test_node(node: PlistNode, depth: int, max_depth: int) -> TestNode:
    _check_depth(depth, max_depth)
    object_class = node.get_string("TestObjectClass")

    if object_class == GROUP_OBJECT_CLASS:
        return TestGroup(
            name=node.get_string("TestName"),
            children=tuple(
                _convert_test_node(child, depth + 1, max_depth)
                for child in node.get_list("Subtests")
            ),
        )

    if object_class == TEST_OBJECT_CLASS:
        return TestCase(
            identifier=node.get_string("TestIdentifier"),
            name=node.get_string("TestName"),
            summary_guid=node.get_string("TestSummaryGUID"),
            test_status=node.get_string("TestStatus"),
            duration=node.get_double("Duration"),
            activities=tuple(
                _convert_activity(activity, 1, max_depth)
                for activity in node.get_list("ActivitySummaries")
            ),
            failure_summaries=tuple(
                _convert_failure(failure)
                for failure in node.get_list("FailureSummaries")
            ),
        )

    return UnrecognizedNode(object_class=object_class)


def _convert_activity(node: PlistNode, depth: int, max_depth: int) -> Activity:
    _check_depth(depth, max_depth)
    attachments = (
        attachment.get_string("Filename") for attachment in node.get_list("Attachments")
    )
    return Activity(
        activity_type=node.get_string("ActivityType"),
        title=node.get_string("Title"),
        uuid=node.get_string("UUID"),
        start=node.get_double("StartTimeInterval"),
        finish=node.get_double("FinishTimeInterval"),
        diagnostic_report_file_name=node.get_string("DiagnosticReportFileName"),
        sub_activities=tuple(
            _convert_activity(child, depth + 1, max_depth)
            for child in node.get_list("SubActivities")
        ),
        attachments=tuple(name for name in attachments if name is not None),
    )


def _convert_failure(node: PlistNode) -> FailureSummary:
    return FailureSummary(
        file_name=node.get_string("FileName"),
        message=node.get_string("Message"),
        line_number=node.get_string("LineNumber"),
        performance_failure=node.get_bool("PerformanceFailure", False),
    )
