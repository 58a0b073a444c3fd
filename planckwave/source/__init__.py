from __future__ import annotations

import os
from pathlib import Path

import pandas as pd

from ..io import read_yaml
from .source import BlackBody  # noqa

here, this_filename = os.path.split(__file__)

SOURCE_CONFIGS = {}
for sources_path in sorted(Path(f"{here}/sources").glob("*.yml")):
    SOURCE_CONFIGS.update(read_yaml(sources_path))

SOURCE_DISPLAY_COLUMNS = ["description", "temperature"]
source_data = pd.DataFrame(SOURCE_CONFIGS).T.sort_index()
all_sources = list(source_data.index.values)


class InvalidSourceError(Exception):
    def __init__(self, invalid_source):
        super().__init__(
            f"The source '{invalid_source}' is not supported. "
            f"Supported sources are:\n\n{source_data.loc[:, SOURCE_DISPLAY_COLUMNS].to_string()}",
        )


def get_source_config(source_name="sun", **kwargs):
    if source_name not in SOURCE_CONFIGS.keys():
        raise InvalidSourceError(source_name)
    SOURCE_CONFIG = SOURCE_CONFIGS[source_name].copy()
    for k, v in kwargs.items():
        SOURCE_CONFIG[k] = v
    return SOURCE_CONFIG


def get_source(source_name="sun", **kwargs):
    config = get_source_config(source_name=source_name, **kwargs)
    config.setdefault("name", source_name)
    return BlackBody(**config)
