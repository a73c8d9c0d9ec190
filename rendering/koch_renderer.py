"""
Koch snowflake renderer using Cairo.
Draws the boundary exported at any lattice size onto a high-resolution canvas.
"""

import cairo
import numpy as np
import imageio
from tqdm import tqdm
from typing import Any, Dict, List
from pathlib import Path

from config.render_config import KochRenderConfig
from .base import Renderer


class KochRenderer(Renderer):
    def __init__(self, config: KochRenderConfig = None):
        super().__init__(config or KochRenderConfig())

    def _draw_segments(self, ctx: cairo.Context, segments: List, scale_x: float,
                       scale_y: float, generation: int):
        r, g, b, a = self.config.color_for(generation)
        ctx.set_source_rgba(r, g, b, a)
        ctx.set_line_width(self.config.line_width)
        ctx.set_line_cap(cairo.LINE_CAP_ROUND)
        ctx.set_line_join(cairo.LINE_JOIN_ROUND)

        for (x1, y1), (x2, y2) in segments:
            ctx.move_to(x1 * scale_x, y1 * scale_y)
            ctx.line_to(x2 * scale_x, y2 * scale_y)
        ctx.stroke()

    def render_frame(self, data: Dict[str, Any]) -> np.ndarray:
        surface, ctx = self._create_surface()

        scale_x, scale_y = self._compute_scale(data['source_width'], data['source_height'])
        self._draw_segments(ctx, data['segments'], scale_x, scale_y, data.get('generation', 0))

        return self._surface_to_numpy(surface)

    def save_frame(self, data: Dict[str, Any], output_path: str):
        frame = self.render_frame(data)
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        imageio.imwrite(output_path, frame)
        print(f"  Saved frame: {output_path}")

    def render_animation(self, frames_data: List[Dict[str, Any]], output_path: str,
                         fps: int = 2, hold_last: int = 1):
        """
        Render one frame per generation and write them as an animation.

        hold_last: number of times the final generation is repeated at the end.
        """
        if not frames_data:
            raise ValueError("No frames to render")

        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        frames = [
            self.render_frame(data)
            for data in tqdm(frames_data, desc="Rendering Koch generations")
        ]
        frames.extend([frames[-1]] * max(0, hold_last - 1))

        imageio.mimsave(output_path, frames, fps=fps)
        print(f"  Saved animation: {output_path}")
        return frames
