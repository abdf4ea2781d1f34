import time

from src.core.time.time_source import TimeSource


class SystemTimeSource(TimeSource):
    def epoch_seconds(self) -> int:
        # Truncated, matching how payload timestamps are written
        return int(time.time())
