"""Error taxonomy for document loading"""


class MalformedDocument(ValueError):
    """Raised when a document opens a front-matter block that never closes."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


class DuplicateOutput(ValueError):
    """Raised when two documents would be exported to the same sidecar path."""

    def __init__(self, source: str, previous: str, path):
        self.source = source
        self.previous = previous
        self.path = path
        super().__init__(f"{source}: output {path} already written for {previous}")
