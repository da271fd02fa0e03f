from .accumulator import Descriptive, lowest_value
from .snapshot import DescriptiveSnapshot
from .formatter import DelimitedFormatter
from .config import FormatterConfig, create_formatter, load_formatter_config, register_formatter_config_groups
from .errors import EmptyAccumulatorError, SampleParseError

__all__ = [
    'Descriptive', 'lowest_value', 'DescriptiveSnapshot', 'DelimitedFormatter',
    'FormatterConfig', 'create_formatter', 'load_formatter_config',
    'register_formatter_config_groups', 'EmptyAccumulatorError',
    'SampleParseError'
]
