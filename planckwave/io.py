from __future__ import annotations

import logging
import pathlib
import time as ttime

import yaml


def read_yaml(path: str):
    """
    Return a YAML file as a dict
    """
    res = yaml.safe_load(pathlib.Path(path).read_text())
    return res if res is not None else {}


def humanize_time(seconds: float):
    if seconds < 1e-3:
        return f"{1e6 * seconds:.0f} us"
    if seconds < 1e0:
        return f"{1e3 * seconds:.01f} ms"
    return f"{seconds:.02f} s"


def log_duration(ref_time, message, level="debug"):
    logger = logging.getLogger("planckwave")
    string = f"{message} in {humanize_time(ttime.monotonic() - ref_time)}."
    getattr(logger, level)(string)
