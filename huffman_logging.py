# filename: huffman_logging.py
import logging
import os
from datetime import datetime
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def _make_log_dir(path: Union[str, os.PathLike]) -> str:
    os.makedirs(path, exist_ok=True)
    return str(path)


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level: {level}")
    return resolved


def setup_logging(name: str = __name__, log_dir: Optional[str] = None,
                  level: Union[int, str] = logging.INFO) -> logging.Logger:
    level = _resolve_level(level)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[logging.StreamHandler()])
    else:
        root.setLevel(level)
    if log_dir is not None:
        _make_log_dir(log_dir)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        handler = logging.FileHandler(os.path.join(log_dir, f"run_{timestamp}.log"))
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    return logging.getLogger(name)
