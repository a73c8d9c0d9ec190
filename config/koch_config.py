"""
Configuration for the Koch snowflake.
"""

from dataclasses import dataclass


@dataclass
class KochConfig:
    # Drawing lattice
    width: int = 800
    height: int = 600
    padding: int = 30

    max_iterations: int = 6
    thread_sleep_time: int = 1000  # ms between generations

    title: str = 'Koch Snowflake'
    subtitle: str = 'A Fractal with self self-similarity'
    copyright: str = '(C) 2006 - 2022 Thomas Woehlke'

    animate: bool = False
    output_dir: str = 'outputs/koch'

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"width and height must be positive, got {self.width}x{self.height}"
            )
        if self.padding < 0:
            raise ValueError(f"padding must be non-negative, got {self.padding}")
        if 2 * self.padding >= min(self.width, self.height):
            raise ValueError(
                f"padding {self.padding} leaves no room for the seed triangle "
                f"in a {self.width}x{self.height} lattice"
            )
        if self.max_iterations < 0:
            raise ValueError(f"max_iterations must be non-negative, got {self.max_iterations}")
        if self.thread_sleep_time < 0:
            raise ValueError(f"thread_sleep_time must be non-negative, got {self.thread_sleep_time}")

    @property
    def delay_seconds(self) -> float:
        return self.thread_sleep_time / 1000.0

    @classmethod
    def from_pipeline(cls, pipeline_config) -> 'KochConfig':
        """Create Koch Config from PipelineConfig."""
        return cls(
            width=pipeline_config.width,
            height=pipeline_config.height,
            padding=pipeline_config.padding,
            max_iterations=pipeline_config.max_iterations,
            thread_sleep_time=pipeline_config.thread_sleep_time,
            title=pipeline_config.title,
            subtitle=pipeline_config.subtitle,
            copyright=pipeline_config.copyright,
            animate=pipeline_config.animate,
            output_dir=str(pipeline_config.koch_output_dir),
        )
