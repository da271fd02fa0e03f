class EmptyAccumulatorError(ValueError):
    """Raised when a statistic without a value for an empty sample set is requested."""

    def __init__(self, operation: str):
        super().__init__(
            f'"{operation}" is undefined for an empty accumulator; check count() first'
        )
        self.operation = operation


class SampleParseError(ValueError):
    """Raised when an input token can not be converted to the sample type."""

    def __init__(self, source: str, line_number: int, token: str, dtype: str):
        super().__init__(
            f'{source}:{line_number}: can not convert "{token}" to {dtype}')
        self.source = source
        self.line_number = line_number
        self.token = token
        self.dtype = dtype
