from typing import TextIO


class TeeStdout:
    """
    Duplicates everything written to it across several text streams,
    e.g. the console and a menu session transcript.
    """
    # Initialize with multiple streams
    def __init__(self, *streams: TextIO):
        self.streams = streams

    # Write data to all streams
    def write(self, data: str) -> int:
        for s in self.streams:
            s.write(data)
            s.flush()
        return len(data)

    # Flush all streams
    def flush(self) -> None:
        for s in self.streams:
            s.flush()
