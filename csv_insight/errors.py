class ProfilerError(Exception):
    pass


class LoadError(ProfilerError):
    pass


class ValidationError(ProfilerError):
    pass


class EmptyDataset(ProfilerError):
    """Raised when an upload has a header but no data rows."""

    def __init__(self, message: str = 'CSV file is empty'):
        super().__init__(message)


class MalformedRow(ProfilerError):
    """A data line whose field count does not match the header.

    Recoverable: the lenient parser records one of these per offending line
    and keeps going; only strict parsing raises it.
    """

    def __init__(self, line_number: int, expected: int, actual: int):
        self.line_number = line_number
        self.expected = expected
        self.actual = actual
        kind = 'missing' if actual < expected else 'extra'
        super().__init__(f"Line {line_number}: expected {expected} fields, got {actual} ({kind} fields)")

    def to_dict(self):
        return {'line': self.line_number, 'expected': self.expected, 'actual': self.actual}
