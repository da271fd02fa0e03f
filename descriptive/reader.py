import logging
from typing import Any, Iterable, Iterator, TextIO
import numpy as np
import numpy.typing as npt

from .errors import SampleParseError

logger = logging.getLogger('reader')


def parse_samples(lines: Iterable[str],
                  dtype: npt.DTypeLike = np.float64,
                  source: str = '<input>') -> Iterator[Any]:
    """Yield the whitespace separated samples of the lines as `dtype` scalars.

    Everything after a '#' is a comment. Raises SampleParseError on the first
    token that can not be converted.
    """

    dtype = np.dtype(dtype)

    for line_number, line in enumerate(lines, start=1):
        content = line.split('#', 1)[0]
        for token in content.split():
            try:
                yield dtype.type(token)
            except (ValueError, OverflowError) as e:
                raise SampleParseError(source=source,
                                       line_number=line_number,
                                       token=token,
                                       dtype=str(dtype)) from e


def read_samples(stream: TextIO,
                 dtype: npt.DTypeLike = np.float64,
                 source: str | None = None) -> Iterator[Any]:

    source = source if source is not None else getattr(
        stream, 'name', '<stream>')
    logger.debug('reading samples from "%s"...', source)

    return parse_samples(stream, dtype=dtype, source=source)
