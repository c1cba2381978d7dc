"""
recordui Kernel — Errors

A record either parses entirely or is rejected. These are the only
failures the kernel raises; the tool boundary turns each of them into an
error result instead of letting it reach the host transport.
"""

from __future__ import annotations


class RecordParseError(ValueError):
    """Base class for every record text failure."""


class MissingNameError(RecordParseError):
    def __init__(self) -> None:
        super().__init__("Missing object name (first non-bullet line).")


class MissingFieldsError(RecordParseError):
    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Missing required fields: {', '.join(self.missing)}")


class BatchParseError(RecordParseError):
    """
    One or more texts of a batch failed. The whole batch is rejected, but
    every failing entry is reported with its 1-based position.
    """

    def __init__(self, failures: list[tuple[int, RecordParseError]], total: int) -> None:
        self.failures = list(failures)
        self.total = total
        details = "; ".join(f"Record {position}: {error}" for position, error in self.failures)
        noun = "record" if total == 1 else "records"
        super().__init__(f"{len(self.failures)} of {total} {noun} could not be parsed. {details}")


class MessageError(ValueError):
    """An artifact message that does not match the bridge protocol."""
