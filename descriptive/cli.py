import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator
import tyro
from hydra.errors import InstantiationException

from .accumulator import Descriptive
from .config import FormatterConfig, create_formatter, load_formatter_config_file
from .formatter import DelimitedFormatter
from .reader import read_samples
from .utils.logging import configure_logger

logger = logging.getLogger('describe')

DEBUG_LOGGERS = ['describe', 'reader', 'DelimitedFormatter', 'descriptive.config']


@dataclass
class DescribeParams:
    """Print count, min, mean, max and standard deviation of numeric samples."""

    inputs: list[Path] = field(default_factory=list)
    """Files with whitespace separated samples; stdin when empty."""
    dtype: str = 'float64'
    """numpy dtype of the samples."""
    delimiter: str = '\t'
    float_format: str | None = None
    """Format spec for the floating fields, for example '.3f'."""
    header: bool = False
    """Print the column names before the statistics."""
    median: bool = False
    """Append the median column."""
    formatter_config: Path | None = None
    """YAML file overriding the formatter settings."""
    debug: bool = False


def _iterate_samples(params: DescribeParams) -> Iterator:
    if not params.inputs:
        yield from read_samples(sys.stdin, dtype=params.dtype, source='<stdin>')
        return

    for path in params.inputs:
        with open(path, 'r', encoding='utf-8') as f:
            yield from read_samples(f, dtype=params.dtype, source=str(path))


def _create_formatter(params: DescribeParams) -> DelimitedFormatter:
    formatter_config = FormatterConfig(delimiter=params.delimiter,
                                       float_format=params.float_format,
                                       include_median=params.median)
    if params.formatter_config is not None:
        formatter_config = load_formatter_config_file(params.formatter_config,
                                                      base=formatter_config)
    return create_formatter(formatter_config)


def describe(params: DescribeParams) -> int:

    configure_logger(debug_loggers=DEBUG_LOGGERS if params.debug else None,
                     stream=sys.stderr)

    try:
        formatter = _create_formatter(params)
        accumulator = Descriptive(dtype=params.dtype)
        accumulator.update(_iterate_samples(params))
    except (OSError, TypeError, ValueError, InstantiationException) as e:
        logger.error('%s', e)
        return 1

    logger.debug('samples read; accumulator=%r', accumulator)

    if params.header:
        print(formatter.header())
    print(formatter.format(accumulator.snapshot()))
    return 0


def main(args: list[str] | None = None) -> int:
    params = tyro.cli(DescribeParams, args=args)
    return describe(params)


if __name__ == '__main__':
    sys.exit(main())
