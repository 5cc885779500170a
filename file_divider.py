"""
File Divider
Splits a file into numbered segments and joins the segments back together.

Usage:
    divider = FileDivider()

    # video.mkv -> out.mkv.000, out.mkv.001, ...
    divider.split(100, SizeUnit.MB, "video.mkv", "out.mkv")

    # out.mkv.000, out.mkv.001, ... -> out.mkv
    divider.join("out.mkv.001")

Both operations are all-or-nothing: if anything fails midway, the files
created so far are deleted before the error is raised.
"""

import logging
import os
from contextlib import contextmanager
from typing import BinaryIO, Iterable, List, Optional

from file_access import FileAccess
from segment_names import (
    MAX_ORDINAL,
    discover_segments,
    segment_name,
    segment_ordinal,
    segment_target,
)
from size_units import SizeExpression, SizeUnit

# Joins are entered from the .001 segment
JOIN_ENTRY_ORDINAL = 1
COPY_BLOCK_SIZE = 1024 * 1024

LABEL_WIDTH = 25


class DividerError(Exception):
    """Base class for split and join failures."""


class InvalidInput(DividerError):
    pass


class OutputAlreadyExists(InvalidInput):
    pass


class InvalidJoinEntryPoint(InvalidInput):
    pass


class SegmentationTooLarge(DividerError):
    pass


class OutputCreationFailed(DividerError):
    pass


class SegmentReadFailed(DividerError):
    pass


class SegmentWriteFailed(DividerError):
    pass


def _label(text: str) -> str:
    return f"{text:<{LABEL_WIDTH}}"


def revert(files: FileAccess, paths: Iterable[str], log: Optional[logging.Logger] = None) -> bool:
    """
    Delete files created by a failed operation.

    Deletion failures are logged, never raised.

    Args:
        files: File access used to delete
        paths: Files to remove
        log: Logger for deletion failures (None when quiet)

    Returns:
        bool: True if none of the paths exist afterwards
    """
    reverted = True
    for path in reversed(list(paths)):
        try:
            if files.exists(path):
                files.delete(path)
        except OSError as e:
            if log:
                log.warning("Could not delete %s: %s", path, e)
        if files.exists(path):
            reverted = False
    return reverted


@contextmanager
def reverting(files: FileAccess, log: Optional[logging.Logger] = None,
              created: Optional[List[str]] = None):
    """Yield a list of created paths; revert them if the block raises."""
    created = [] if created is None else created
    try:
        yield created
    except BaseException:
        if log:
            log.error("Fatal error occurred, reverting...")
        if not revert(files, created, log) and log:
            log.warning("Some files could not be removed: %s",
                        ", ".join(p for p in created if files.exists(p)))
        raise


class FileDivider:
    """
    Split and join files.

    Args:
        logger: Logger receiving progress messages
        quiet: Suppress all progress and diagnostic output
        files: File access implementation (default: local filesystem)
        keep_empty_tail: Write a zero-length last segment when the file
            size is an exact multiple of the segment size
    """

    def __init__(self, logger: Optional[logging.Logger] = None, quiet: bool = False,
                 files: Optional[FileAccess] = None, keep_empty_tail: bool = False):
        self.logger = logger or logging.getLogger("file_divider")
        self.quiet = quiet
        self.files = files or FileAccess()
        self.keep_empty_tail = keep_empty_tail

    @property
    def log(self) -> Optional[logging.Logger]:
        return None if self.quiet else self.logger

    def _info(self, msg, *args):
        if self.log:
            self.log.info(msg, *args)

    def segment_count(self, file_size: int, segment_size: int) -> int:
        full, rest = divmod(file_size, segment_size)
        if rest or self.keep_empty_tail:
            return full + 1
        return full

    def split(self, magnitude: int, unit: SizeUnit, input_path: str, output_path: str = "") -> List[str]:
        """
        Split a file into segments of ``magnitude * unit`` bytes.

        Args:
            magnitude: Segment size in units
            unit: Size unit
            input_path: File to split
            output_path: Base path of the segments (default: input_path)

        Returns:
            list: Created segment paths, in order
        """
        return self.split_expression(SizeExpression(magnitude, unit), input_path, output_path)

    def split_expression(self, expression: SizeExpression, input_path: str,
                         output_path: str = "") -> List[str]:
        files = self.files

        if not files.exists(input_path):
            raise InvalidInput(f"{input_path} does not exist")

        segment_size = expression.byte_count
        if segment_size <= 0:
            raise InvalidInput(f"Segment size must be positive: {expression}")

        file_size = files.size(input_path)
        if segment_size >= file_size:
            raise SegmentationTooLarge(
                f"Segmentation size {expression} ({segment_size} bytes) is not smaller "
                f"than input file ({file_size} bytes)")

        output_path = output_path or input_path

        count = self.segment_count(file_size, segment_size)
        if count > MAX_ORDINAL + 1:
            raise InvalidInput(
                f"Splitting into {count} segments exceeds the limit of {MAX_ORDINAL + 1}")

        targets = [segment_name(output_path, ordinal) for ordinal in range(count)]
        for target in targets:
            if files.exists(target):
                raise OutputAlreadyExists(f"{_label('File already exists:')}{target}")

        self._info("%s%s\n%s%s\n%s%s\n",
                   _label("Split:"), input_path,
                   _label("Output file:"), output_path,
                   _label("Segment size:"), expression)

        with reverting(files, self.log) as created:
            try:
                source = files.open_read(input_path)
            except OSError as e:
                raise SegmentReadFailed(f"Could not read {input_path}: {e}") from e

            with source:
                remaining = file_size
                for target in targets:
                    buffer = self._read_segment(source, min(remaining, segment_size), input_path)
                    created.append(target)
                    try:
                        files.write_bytes(target, buffer)
                    except OSError as e:
                        raise SegmentWriteFailed(f"Could not write {target}: {e}") from e
                    self._info("%s%s, size: %d bytes", _label(target), output_path, len(buffer))
                    remaining -= len(buffer)

        return list(created)

    def _read_segment(self, source: BinaryIO, length: int, input_path: str) -> bytes:
        try:
            buffer = source.read(length)
        except OSError as e:
            raise SegmentReadFailed(f"Could not read {input_path}: {e}") from e
        if len(buffer) != length:
            raise SegmentReadFailed(
                f"{input_path} ended early: expected {length} bytes, got {len(buffer)}")
        return buffer

    def join(self, first_segment_path: str, output_path: str = "") -> str:
        """
        Join the segments of a split file.

        Args:
            first_segment_path: The .001 segment of the set
            output_path: Joined file, relative to the segment directory
                (default: segment name without its ordinal)

        Returns:
            str: Path of the joined file
        """
        files = self.files

        if segment_ordinal(first_segment_path) != JOIN_ENTRY_ORDINAL:
            raise InvalidJoinEntryPoint(f"{_label('Invalid input file:')}{first_segment_path}")
        if not files.exists(first_segment_path):
            raise InvalidInput(f"{first_segment_path} does not exist")

        directory = os.path.dirname(first_segment_path)
        target = segment_target(first_segment_path)
        output_path = os.path.join(directory, output_path or target)

        if files.exists(output_path):
            raise OutputAlreadyExists(f"{_label('File already exists:')}{output_path}")

        try:
            names = files.list_dir(directory)
        except OSError as e:
            raise SegmentReadFailed(f"Could not list {directory or '.'}: {e}") from e
        segments = discover_segments(directory, names, target, output_path)

        try:
            files.create(output_path)
        except OSError as e:
            raise OutputCreationFailed(f"Could not create: {output_path}") from e

        self._info("%s%s\n%s%s\n",
                   _label("Join:"), first_segment_path,
                   _label("Output file:"), output_path)

        with reverting(files, self.log, [output_path]):
            try:
                writer = files.open_append(output_path)
            except OSError as e:
                raise OutputCreationFailed(f"Could not open {output_path}: {e}") from e

            with writer:
                for segment in segments:
                    self._copy_segment(segment, writer)
                    self._info("Joining %s, current size: %d bytes", segment, writer.tell())
                try:
                    writer.flush()
                except OSError as e:
                    raise SegmentWriteFailed(f"Could not write {output_path}: {e}") from e

        return output_path

    def _copy_segment(self, segment: str, writer: BinaryIO) -> None:
        try:
            reader = self.files.open_read(segment)
        except OSError as e:
            raise SegmentReadFailed(f"Could not open {segment}: {e}") from e

        with reader:
            while True:
                try:
                    block = reader.read(COPY_BLOCK_SIZE)
                except OSError as e:
                    raise SegmentReadFailed(f"Could not read {segment}: {e}") from e
                if not block:
                    break
                try:
                    writer.write(block)
                except OSError as e:
                    raise SegmentWriteFailed(f"Could not write {segment} to output: {e}") from e
