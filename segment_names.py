"""
Segment naming: <base>.<NNN> with a zero-padded three digit ordinal.
"""

import os
import re
from typing import Iterable, List, Optional

MAX_ORDINAL = 999
ORDINAL_WIDTH = 3

ORDINAL_RE = re.compile(r"\.(\d{3})$")


def segment_name(base_path: str, ordinal: int) -> str:
    """Return the path of segment ``ordinal`` for ``base_path``."""
    if not 0 <= ordinal <= MAX_ORDINAL:
        raise ValueError(f"Segment ordinal out of range: {ordinal}")
    return f"{base_path}.{ordinal:0{ORDINAL_WIDTH}d}"


def segment_ordinal(path: str) -> Optional[int]:
    match = ORDINAL_RE.search(os.path.basename(path))
    if not match:
        return None
    return int(match.group(1))


def segment_target(path: str) -> str:
    """Strip the ordinal suffix: 'dir/out.bin.001' -> 'out.bin'."""
    return ORDINAL_RE.sub("", os.path.basename(path))


def is_segment_of(candidate_path: str, target_base: str, output_path: Optional[str] = None) -> bool:
    """
    Check whether a file belongs to the segment set of ``target_base``.

    Args:
        candidate_path: File found in the segment directory
        target_base: Base file name shared by the segments
        output_path: The join output, which is never a segment

    Returns:
        bool: True if the file name contains the target and is not the output
    """
    if output_path is not None and os.path.abspath(candidate_path) == os.path.abspath(output_path):
        return False
    return target_base in os.path.basename(candidate_path)


def discover_segments(directory: str, names: Iterable[str], target_base: str,
                      output_path: Optional[str] = None) -> List[str]:
    """
    Select the segments of ``target_base`` from a directory listing.

    Only files named exactly <target_base>.<NNN> are kept. Listing order
    is not trusted; the result is sorted by ordinal.

    Args:
        directory: Directory the names were listed from
        names: File names in that directory
        target_base: Base file name shared by the segments
        output_path: Join output to exclude

    Returns:
        list: Segment paths in ascending ordinal order
    """
    segments = []
    for name in names:
        path = os.path.join(directory, name)
        if not is_segment_of(path, target_base, output_path):
            continue
        if segment_ordinal(path) is None or segment_target(path) != target_base:
            continue
        segments.append(path)
    return sorted(segments, key=segment_ordinal)
