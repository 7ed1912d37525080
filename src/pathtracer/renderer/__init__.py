from pathtracer.renderer.image_output import save_image
from pathtracer.renderer.scene import CONTINUATION_PROBABILITY, ROULETTE_DEPTH, Scene
from pathtracer.renderer.tile_renderer import (
    TileRenderer,
    partition_columns,
    pixel_to_rgb8,
    render_section,
)

__all__ = [
    "save_image",
    "CONTINUATION_PROBABILITY",
    "ROULETTE_DEPTH",
    "Scene",
    "TileRenderer",
    "partition_columns",
    "pixel_to_rgb8",
    "render_section",
]
