"""
Rendering module for high-resolution drawing of the Koch snowflake.
Uses Cairo for resolution-independent vector graphics.
"""

from config.render_config import KochRenderConfig
from .koch_renderer import KochRenderer
from .exporters import (
    snowflake_to_data,
    export_koch_data,
    collect_generation_frames,
    load_koch_data
)
