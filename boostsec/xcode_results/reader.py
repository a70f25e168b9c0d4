"""Entry point reading every TestSummaries file of a results directory."""

import logging
from pathlib import Path

from boostsec.xcode_results.document_reader import read_document
from boostsec.xcode_results.models.reader_config import ReaderConfig
from boostsec.xcode_results.plist_document import BundleReadError, list_results
from boostsec.xcode_results.test_walker import SkippedNode, TestWalker
from boostsec.xcode_results.visitor import ResultsVisitor

logger = logging.getLogger(__name__)


class XcodeResultsReader:
    """Reads Xcode result bundles and reports their tests to a visitor."""

    def read_results(
        self,
        configuration: ReaderConfig | None,
        visitor: ResultsVisitor,
        directory: Path,
    ) -> None:
        """Convert every summary file in the directory; never raises.

        Args:
            configuration: Reader settings, defaults when None
            visitor: Receiver of results and attachment files
            directory: Directory holding ``*TestSummaries.plist`` files

        """
        config = configuration or ReaderConfig()
        try:
            result_files = list_results(directory, config.results_pattern)
        except (OSError, ValueError, NotImplementedError) as e:
            logger.error(f"Could not list results in {directory}: {e}")
            return

        logger.info(f"Found {len(result_files)} summary files in {directory}")
        for result_file in result_files:
            self.process_file(result_file, config, visitor)

    def process_file(
        self, result_file: Path, config: ReaderConfig, visitor: ResultsVisitor
    ) -> int:
        """Convert one summary file, returning the number of results emitted.

        Any failure skips the rest of the file and is logged.
        """
        logger.debug(f"Parsing file {result_file}")
        emitted = 0
        try:
            document = read_document(result_file, config.max_depth)
            walker = TestWalker(
                result_file.parent / config.attachments_dir_name,
                visitor,
                config.result_format,
            )
            for summary in document.summaries:
                for outcome in walker.walk_summary(summary):
                    if isinstance(outcome, SkippedNode):
                        logger.debug(
                            f"Skipping node {outcome.node_name} in {result_file}: "
                            f"{outcome.reason}"
                        )
                        continue
                    visitor.visit_test_result(outcome)
                    emitted += 1
        except BundleReadError as e:
            logger.error(f"Could not parse file {result_file}: {e}")
        except RecursionError:
            logger.error(f"Could not parse file {result_file}: nesting too deep")
        except Exception:
            logger.exception(f"Failed to convert file {result_file}")

        logger.info(f"Read {emitted} test results from {result_file}")
        return emitted
