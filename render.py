"""
Rendering Script

Generates high-resolution images and animations of the Koch snowflake
using the Cairo-based renderer.

Configuration is loaded from config/pipeline.json.
All paths are derived from the run name.

Modes:
    frame     - Render the final generation from exported render data
                (falls back to growing the snowflake when no data exists)
    animation - Grow the snowflake and render one frame per generation
"""

import argparse
import os
from pathlib import Path

from config import load_config, KochConfig, KochRenderConfig
from koch import KochSnowflake
from rendering import (
    KochRenderer,
    load_koch_data,
    snowflake_to_data,
    collect_generation_frames
)


def remove_if_exists(path: str):
    """Remove file if it exists to ensure fresh write."""
    p = Path(path)
    if p.exists():
        try:
            os.remove(p)
            print(f"Removed existing file: {path}")
        except OSError as e:
            print(f"Error removing {path}: {e}")


def render_frame(pipeline):
    """Render the final boundary as a single high-resolution image."""
    data_path = pipeline.koch_render_data_path

    if data_path.exists():
        print(f"Loading render data from {data_path}...")
        data = load_koch_data(str(data_path))
    else:
        print(f"No render data at {data_path}, growing snowflake...")
        snowflake = KochSnowflake(KochConfig.from_pipeline(pipeline))
        snowflake.grow(delay=0)
        data = snowflake_to_data(snowflake)

    renderer = KochRenderer(KochRenderConfig.from_pipeline(pipeline))

    output_path = str(pipeline.render_frame_path)
    remove_if_exists(output_path)
    renderer.save_frame(data, output_path)
    return data


def render_animation(pipeline):
    """Render the growth of the snowflake, one frame per generation."""
    koch_config = KochConfig.from_pipeline(pipeline)

    print(f"Collecting {koch_config.max_iterations + 1} generations...")
    frames_data = collect_generation_frames(koch_config)

    renderer = KochRenderer(KochRenderConfig.from_pipeline(pipeline))

    output_path = str(pipeline.render_gif_path)
    remove_if_exists(output_path)
    renderer.render_animation(frames_data, output_path, fps=pipeline.render_fps,
                              hold_last=pipeline.render_fps)

    print(f"Saved animation to {output_path}")
    return frames_data


def main():
    parser = argparse.ArgumentParser(description="Render the Koch snowflake.")
    parser.add_argument(
        '--mode',
        type=str,
        choices=['frame', 'animation'],
        default='animation',
        help='Rendering mode: frame or animation (default: animation)'
    )
    parser.add_argument(
        '--config',
        type=str,
        default='config/pipeline.json',
        help='Path to the pipeline config (default: config/pipeline.json)'
    )
    args = parser.parse_args()

    pipeline = load_config(args.config)
    pipeline.create_output_dirs()

    print(f"Rendering: {pipeline.run_name}")
    print(f"Output: {pipeline.render_output_dir}")
    print(f"Mode: {args.mode}")
    print()

    if args.mode == 'frame':
        render_frame(pipeline)
    elif args.mode == 'animation':
        render_animation(pipeline)


if __name__ == '__main__':
    main()
