"""Mismatch action enum for handling unmatched candidates during branch matching."""

from enum import Enum


class MismatchAction(str, Enum):
    """Action to take when a branch candidate matches no node of the current frontier.

    Values:
        SKIP: Skip the candidate and try the next one against the same frontier (default behavior)
        ABORT: Stop matching immediately and report no match
    """

    SKIP = "skip"
    ABORT = "abort"
