"""
Configuration module.
"""

from .pipeline import PipelineConfig, load_config, save_config
from .koch_config import KochConfig
from .render_config import KochRenderConfig

__all__ = [
    'PipelineConfig',
    'load_config',
    'save_config',
    'KochConfig',
    'KochRenderConfig'
]
