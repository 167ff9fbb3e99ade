"""ProcessorRun Schema"""

import uuid
import datetime
from dataclasses import dataclass, field


@dataclass
class ProcessorRun:
    """
    Represents one run of the processor over a list of input files.

    Attributes:
        run_id (uuid.UUID): Unique identifier for the run.
        run_timestamp (datetime.datetime): Timestamp when the run was created.
        command (str): Console command that launched the run.
        files_processed (list): Paths that were opened and read to the end.
        files_failed (list): Paths that could not be opened.
        observations (int): Number of observations folded into the summary.
        skipped_lines (int): Number of malformed lines that were skipped.
    """

    run_id: uuid.UUID
    run_timestamp: datetime.datetime
    command: str
    files_processed: list = field(default_factory=list)
    files_failed: list = field(default_factory=list)
    observations: int = 0
    skipped_lines: int = 0
