"""
Processor class for climate observation files.
"""

import logging
import queue
import sys
import uuid
from datetime import datetime, timezone
from typing import List

from climate.builders import RegionBuilder
from climate.exceptions import FileUnavailable
from climate.reader import open_input, read_observations
from climate.schema import ProcessorRun


class Processor:
    """Main class for summarising climate observation files."""

    def __init__(self, paths: List[str], fail_fast: bool = False):
        if not paths:
            raise ValueError("At least one input file is required.")

        self.paths = list(paths)
        self.fail_fast = fail_fast
        self.builder = RegionBuilder()

        self.run_id = str(uuid.uuid4())
        self.run_info = ProcessorRun(
            run_id=self.run_id,
            run_timestamp=datetime.now(timezone.utc),
            command=" ".join(sys.argv),
        )

        self.processing_queue = queue.Queue()

    def fill_up_queue(self):
        """Put every input path in the processing queue, in the order given."""
        for path in self.paths:
            self.processing_queue.put(path)

    def _count_skipped(self, _error):
        self.run_info.skipped_lines += 1

    def process_file(self, path: str) -> int:
        """
        Fold every observation of a single file into the region summary.

        Args:
            path (str): Path of the input file.

        Returns:
            int: Number of observations folded from the file.

        Raises:
            FileUnavailable: If the file cannot be opened.
        """
        logging.info("Opening file: %s", path)

        with open_input(path) as lines:
            observations = read_observations(
                lines, source=path, on_skip=self._count_skipped
            )
            count = self.builder.ingest_all(observations)

        self.run_info.observations += count
        self.run_info.files_processed.append(path)
        logging.info("Read %d observations from %s", count, path)

        return count

    def process_queue(self):
        """Process the files in the queue, one after another."""
        while not self.processing_queue.empty():
            path = self.processing_queue.get()

            try:
                self.process_file(path)
            except FileUnavailable as e:
                self.run_info.files_failed.append(path)
                logging.error("Error in opening file: %s", e)

                if self.fail_fast:
                    raise

    def run(self) -> RegionBuilder:
        """Main entry point for processing the input files."""
        logging.info("Starting processing. Run ID: %s", self.run_id)

        self.fill_up_queue()
        self.process_queue()

        if len(self.builder) == 0:
            logging.warning("No records to summarise.")

        if self.run_info.skipped_lines:
            logging.warning(
                "Skipped %d malformed lines.", self.run_info.skipped_lines
            )

        logging.info(
            "Processor done. %d observations in %d regions.",
            self.run_info.observations,
            len(self.builder),
        )

        return self.builder
