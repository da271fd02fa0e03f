import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from hydra.core.config_store import ConfigStore
from hydra.utils import instantiate
from omegaconf import OmegaConf

from .formatter import DelimitedFormatter


@dataclass
class FormatterConfig:
    _target_: str = 'descriptive.formatter.DelimitedFormatter'
    delimiter: str = '\t'
    float_format: Optional[str] = None
    include_median: bool = False


def register_formatter_config_groups(config_store: ConfigStore):

    config_store.store(group='formatter',
                       name='delimited',
                       node=FormatterConfig)


def load_formatter_config(yaml: str,
                          base: FormatterConfig | None = None
                          ) -> FormatterConfig:
    """Merge a YAML document over the given (or the default) formatter config."""

    cfg_default = OmegaConf.structured(
        base if base is not None else FormatterConfig)
    cfg_override = OmegaConf.create(yaml)

    cfg = OmegaConf.merge(cfg_default, cfg_override)
    result = OmegaConf.to_object(cfg)
    assert isinstance(result, FormatterConfig)
    return result


def load_formatter_config_file(path: Path,
                               base: FormatterConfig | None = None
                               ) -> FormatterConfig:

    logging.getLogger(__name__).debug('loading formatter config from "%s"',
                                      path)

    return load_formatter_config(Path(path).read_text(encoding='utf-8'),
                                 base=base)


def create_formatter(config: FormatterConfig) -> DelimitedFormatter:
    formatter = instantiate(config, _convert_='object')
    assert isinstance(formatter, DelimitedFormatter)
    return formatter
