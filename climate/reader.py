"""
Input file integration module for the climate package.
"""

from contextlib import contextmanager
from typing import Callable, Iterable, Iterator, Optional
import logging

from climate.exceptions import FileUnavailable, MalformedRecord
from climate.parser import parse_line
from climate.schema import Observation


@contextmanager
def open_input(path: str) -> Iterator[Iterable[str]]:
    """
    Context manager for reading an input file line by line.

    The file is closed on every exit path, including errors raised
    while its lines are being consumed. Undecodable bytes are replaced
    with U+FFFD so the line is rejected by the parser instead of
    aborting the read.

    Args:
        path (str): Path of the tab-delimited file.

    Yields:
        Iterable[str]: The open file, iterated one line at a time.

    Raises:
        FileUnavailable: If the path cannot be opened for reading.
    """
    try:
        handle = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileUnavailable(path, e.strerror) from e

    logging.debug("Opened %s", path)
    try:
        yield handle
    finally:
        handle.close()
        logging.debug("Closed %s", path)


def read_observations(
    lines: Iterable[str],
    source: str = "<input>",
    on_skip: Optional[Callable[[MalformedRecord], None]] = None,
) -> Iterator[Observation]:
    """
    Lazily parse lines into Observations, skipping malformed ones.

    Args:
        lines (Iterable[str]): Raw lines, e.g. an open file.
        source (str): Name used in warnings for skipped lines.
        on_skip (callable, optional): Called with each MalformedRecord that was skipped.

    Yields:
        Observation: Each successfully parsed observation, in input order.
    """
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue

        try:
            observation = parse_line(line)
        except MalformedRecord as e:
            e.source = source
            e.line_number = line_number
            logging.warning("Skipping malformed record at %s", e)
            if on_skip is not None:
                on_skip(e)
            continue

        yield observation
