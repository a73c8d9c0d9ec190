"""
Configuration for rendering module.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

Color = Tuple[float, float, float, float]


@dataclass
class KochRenderConfig:
    output_width: int = 1024
    output_height: int = 768
    background_color: Color = (0.0, 0.0, 0.0, 1.0)

    # One color per generation, cycled when the snowflake outgrows the list
    palette: List[Color] = field(default_factory=lambda: [
        (1.0, 0.0, 0.0, 1.0),
    ])
    line_width: float = 1.0

    antialiasing: bool = True

    def __post_init__(self):
        if not self.palette:
            raise ValueError("palette needs at least one color")

    def color_for(self, generation: int) -> Color:
        return self.palette[generation % len(self.palette)]

    @classmethod
    def from_pipeline(cls, pipeline_config) -> 'KochRenderConfig':
        """Create render config from PipelineConfig."""
        return cls(
            output_width=pipeline_config.render_width,
            output_height=pipeline_config.render_height,
            background_color=tuple(pipeline_config.background_color),
            palette=[tuple(c) for c in pipeline_config.palette],
            line_width=pipeline_config.line_width,
        )
