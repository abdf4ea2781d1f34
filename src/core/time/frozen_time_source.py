from src.core.time.time_source import TimeSource


class FrozenTimeSource(TimeSource):
    """
    Pinned clock for tests and replays.
    Moves only through `advance_seconds`, so timer and reminder boundaries are exact.
    """
    def __init__(self, epoch_seconds: int):
        if epoch_seconds < 0:
            raise ValueError("FrozenTimeSource requires a non-negative epoch")
        self._epoch_seconds = epoch_seconds

    def epoch_seconds(self) -> int:
        return self._epoch_seconds

    def advance_seconds(self, seconds: int):
        self._epoch_seconds += seconds
