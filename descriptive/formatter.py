import logging
from typing import Any
import numpy as np

from .snapshot import DescriptiveSnapshot

COLUMNS = ['count', 'min', 'mean', 'max', 'standard_deviation']


class DelimitedFormatter:
    """Render a snapshot as a single delimited line.

    The columns are count, min, mean, max and standard deviation, optionally
    followed by the median. An empty snapshot renders as a literal zero
    followed by empty fields.
    """

    _log: logging.Logger

    delimiter: str
    float_format: str | None
    include_median: bool

    def __init__(self,
                 delimiter: str = '\t',
                 float_format: str | None = None,
                 include_median: bool = False):

        self._log = logging.getLogger(__class__.__name__)

        if not delimiter:
            raise ValueError('delimiter must not be empty')

        self.delimiter = delimiter
        self.float_format = float_format
        self.include_median = include_median

        self._log.debug(
            '__init__; delimiter=%r, float_format=%s, include_median=%s',
            delimiter, float_format, include_median)

    def columns(self) -> list[str]:
        return COLUMNS + ['median'] if self.include_median else list(COLUMNS)

    def header(self) -> str:
        return self.delimiter.join(self.columns())

    def format(self, snapshot: DescriptiveSnapshot) -> str:
        if snapshot.count == 0:
            return self.delimiter.join(['0'] + [''] *
                                       (len(self.columns()) - 1))

        fields = [
            str(snapshot.count),
            self._format_number(snapshot.min),
            self._format_number(snapshot.mean),
            self._format_number(snapshot.max),
            self._format_number(snapshot.standard_deviation)
        ]
        if self.include_median:
            fields.append(self._format_number(snapshot.median))

        return self.delimiter.join(fields)

    def _format_number(self, value: Any) -> str:
        # integer samples are always written as they are
        if self.float_format is not None and isinstance(
                value, (float, np.floating)):
            return format(value, self.float_format)
        return str(value)
