"""
Unified configuration for the Koch snowflake pipeline.

All output paths are derived from output_base and run_name.
This is the single source of truth for growing and rendering.
"""

from dataclasses import dataclass, field, asdict
from typing import List, Tuple
from pathlib import Path
import json


@dataclass
class PipelineConfig:
    """
    Unified configuration for the Koch snowflake pipeline.
    All output paths are derived from run_name.
    """

    # ==================== MAIN SETTING ====================
    run_name: str = 'kochsnowflake'

    # ==================== OUTPUT SETTINGS ====================
    output_base: str = 'outputs'

    # ==================== LATTICE SETTINGS ====================
    width: int = 800
    height: int = 600
    padding: int = 30

    # ==================== GROWTH SETTINGS ====================
    max_iterations: int = 6
    thread_sleep_time: int = 1000  # ms between generations
    animate: bool = False

    # ==================== VIEW SETTINGS ====================
    title: str = 'Koch Snowflake'
    subtitle: str = 'A Fractal with self self-similarity'
    copyright: str = '(C) 2006 - 2022 Thomas Woehlke'

    # ==================== RENDERING SETTINGS ====================
    render_width: int = 1024
    render_height: int = 768
    render_fps: int = 2
    line_width: float = 1.0
    background_color: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)
    palette: List[Tuple[float, float, float, float]] = field(default_factory=lambda: [
        (1.0, 0.0, 0.0, 1.0),
    ])

    # ==================== MISC ====================
    profile: bool = False

    def __post_init__(self):
        self.background_color = tuple(self.background_color)
        self.palette = [tuple(c) for c in self.palette]

    # ==================== DERIVED PATHS ====================
    @property
    def koch_output_dir(self) -> Path:
        return Path(self.output_base) / 'koch'

    @property
    def render_output_dir(self) -> Path:
        return Path(self.output_base) / 'rendering'

    @property
    def koch_render_data_path(self) -> Path:
        return self.koch_output_dir / f'{self.run_name}_render_data.json'

    @property
    def koch_metadata_path(self) -> Path:
        return self.koch_output_dir / f'{self.run_name}_metadata.json'

    @property
    def koch_snowflake_path(self) -> Path:
        return self.koch_output_dir / f'{self.run_name}_snowflake.png'

    @property
    def koch_stats_path(self) -> Path:
        return self.koch_output_dir / f'{self.run_name}_stats.png'

    @property
    def koch_animation_path(self) -> Path:
        return self.koch_output_dir / f'{self.run_name}_growth.gif'

    @property
    def render_frame_path(self) -> Path:
        return self.render_output_dir / f'{self.run_name}_frame.png'

    @property
    def render_gif_path(self) -> Path:
        return self.render_output_dir / f'{self.run_name}_growth.gif'

    # ==================== DIRECTORY CREATION ====================
    def create_output_dirs(self):
        """Create all output directories."""
        self.koch_output_dir.mkdir(parents=True, exist_ok=True)
        self.render_output_dir.mkdir(parents=True, exist_ok=True)


def load_config(path: str = 'config/pipeline.json') -> PipelineConfig:
    """Load config from JSON file, with defaults for missing fields."""
    config_path = Path(path)
    if not config_path.exists():
        return PipelineConfig()

    with open(config_path, 'r') as f:
        data = json.load(f)

    return PipelineConfig(**data)


def save_config(config: PipelineConfig, path: str = 'config/pipeline.json'):
    """Save config to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = asdict(config)
    data['background_color'] = list(config.background_color)
    data['palette'] = [list(c) for c in config.palette]

    with open(config_path, 'w') as f:
        json.dump(data, f, indent=2)

    print(f"Saved config to {config_path}")
