"""Host system collaborators."""

import os
import typing as t

import psutil

# Any zero-argument callable returning a positive core count.
CoreCounter = t.Callable[[], int]


def physical_core_count() -> int:
    """Number of physical cores on this host, never less than 1.

    psutil returns None for physical cores on some platforms (and in some
    containers); the logical count is used in that case.
    """
    count = psutil.cpu_count(logical=False)
    if not count:
        count = os.cpu_count()
    return max(1, count or 1)
