"""Progress reporting utilities for the roman converter package.

This module provides a console progress indicator for the batch tools
(CSV column conversion and the round-trip table), so the user can see how
far a long conversion has got.
"""


class ProgressPrinter:
    """In-place "Task...current/total" counter for batch loops.

    The counter is only redrawn every ``step`` items, since conversions are
    fast and redrawing on every row of a large CSV slows the loop down.

    Attributes:
        task_name: Description of the task being performed
        total: Total number of items to process
        step: Redraw the counter every this many items

    Example:
        >>> progress = ProgressPrinter("Converting rows", 3)
        >>> for i in range(3):
        ...     progress.update(i + 1)
        >>> progress.done()
        Converting rows...Done!
    """

    def __init__(self, task_name: str, total: int, step: int = 1):
        """Initialize progress printer.

        Args:
            task_name: Name of the task being tracked (e.g., "Converting rows")
            total: Total number of items to process
            step: Redraw interval; values below 1 are treated as 1
        """
        self.task_name = task_name
        self.total = total
        self.step = max(1, step)

    def update(self, current: int) -> None:
        """Redraw the counter for the current item.

        The line is drawn when current is a multiple of step, and always for
        the last item.

        Args:
            current: Current item number (1-based, not 0-based)
        """
        if current % self.step == 0 or current == self.total:
            print(f"{self.task_name}...{current}/{self.total}", end='\r', flush=True)

    def done(self) -> None:
        """Replace the counter with "Task...Done!" and end the line."""
        print(f"{self.task_name}...Done!    ")  # pad over leftover digits
