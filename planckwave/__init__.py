from __future__ import annotations

import logging

from ._version import __version__, __version_tuple__  # noqa
from .errors import DomainError, ShapeMismatchError  # noqa
from .functions import (  # noqa
    planck_wave,
    planck_wave_array,
    planck_wave_exitance,
    planck_wave_exitance_array,
    planck_wave_exitance_scalar,
    planck_wave_scalar,
)
from .source import BlackBody, InvalidSourceError, all_sources, get_source, source_data  # noqa

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger("planckwave")


def debug():
    logger.setLevel(logging.DEBUG)
