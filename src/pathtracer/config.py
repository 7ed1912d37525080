# config.py
import logging
import sys
from dataclasses import dataclass
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(processName)s] %(levelname)s %(name)s: %(message)s"


@dataclass
class RenderSettings:
    """
    Parameters of one render job.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        samples: Camera rays per pixel.
        threads: Number of column ranges, one worker process each.
        output: Path of the image file to write.
        seed: Base seed for the per-worker generators. None seeds from the OS.
        roulette_compensation: Divide surviving radiance by the continuation
            probability after Russian roulette.
    """
    width: int = 400
    height: int = 300
    samples: int = 100
    threads: int = 8
    output: str = "render.png"
    seed: Optional[int] = None
    roulette_compensation: bool = False

    def validate(self) -> None:
        for name in ("width", "height", "samples", "threads"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Calling it again only changes the level.
    """
    logger = logging.getLogger("pathtracer")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not any(getattr(h, "_pathtracer", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._pathtracer = True
        logger.addHandler(handler)
    return logger
