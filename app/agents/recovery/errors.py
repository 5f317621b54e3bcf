## Errors raised while turning model output into a roadmap document


class RoadmapOutputError(Exception):
    """Base class for every failure of the recovery pipeline."""


class NoJsonBlockFound(RoadmapOutputError):
    pass


class ParseError(RoadmapOutputError):
    def __init__(self, message: str, *, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.line = line
        self.column = column


class InvalidShape(RoadmapOutputError):
    pass
