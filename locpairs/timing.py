# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import timeit
from types import TracebackType
from typing import Optional


class Timing:
    """Context manager that measures the time elapsed in a block of code."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.start_time = None
        self.end_time = None

    def __enter__(self) -> 'Timing':
        self.start_time = timeit.default_timer()
        self.end_time = None
        return self

    def __exit__(self, exc_type: Optional[type], exc_val: Optional[BaseException],
                 exc_tb: Optional[TracebackType]) -> None:
        self.end_time = timeit.default_timer()

    @property
    def elapsed(self) -> float:
        """Return the elapsed time in seconds, up to now if the block is still running."""

        if self.start_time is None:
            return 0.
        end_time = self.end_time if self.end_time is not None else timeit.default_timer()
        return end_time - self.start_time
