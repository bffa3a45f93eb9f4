"""Error taxonomy for the puzzle API.

Services raise these; ``w4ffle.main`` turns them into HTTP responses.
"""


class W4ffleException(Exception):
    """Base class for expected, per-request failures."""


class PuzzleNotFound(W4ffleException):
    """No puzzle has been seeded for the requested date."""

    def __init__(self, date: str):
        super().__init__(f"No puzzle seeded for {date}")
        self.date = date


class BadImageKey(W4ffleException):
    """The image key is empty after decoding."""


class ImageNotFound(W4ffleException):
    """The key is well-formed but no object is stored under it."""

    def __init__(self, key: str):
        super().__init__(f"Image {key!r} not found")
        self.key = key
