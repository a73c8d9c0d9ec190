"""
Koch Snowflake Growth Script

Grows the Koch snowflake from its seed triangle, one generation per
thread_sleep_time, and saves everything needed for later rendering.

Configuration is loaded from config/pipeline.json.

Outputs:
- Final snowflake visualization (.png), or a growth animation (.gif) when animate is set
- Growth statistics (.png)
- Render data (.json) for high-resolution rendering
- Metadata (.json)
"""

import json

from config import load_config, KochConfig
from koch import (
    KochSnowflake,
    visualize_snowflake,
    animate_growth,
    plot_growth_statistics,
    collect_growth_history
)
from koch.profiling import profiler, profile_block
from rendering.exporters import export_koch_data


def main():
    pipeline = load_config()
    pipeline.create_output_dirs()
    profiler.enabled = pipeline.profile

    koch_config = KochConfig.from_pipeline(pipeline)

    print(f"{koch_config.title} - {koch_config.subtitle}")
    print(f"  Lattice: {koch_config.width}x{koch_config.height}, padding {koch_config.padding}")
    print(f"  Max iterations: {koch_config.max_iterations}")
    print(f"  Delay: {koch_config.thread_sleep_time} ms")
    print()

    if koch_config.animate:
        animate_growth(koch_config, save_path=str(pipeline.koch_animation_path), show=False)

    snowflake = KochSnowflake(koch_config)

    with profile_block('KochSnowflake.grow'):
        history = collect_growth_history(snowflake, delay=0 if koch_config.animate else None)

    if not koch_config.animate:
        visualize_snowflake(snowflake, save_path=str(pipeline.koch_snowflake_path))

    plot_growth_statistics(history, save_path=str(pipeline.koch_stats_path))

    export_koch_data(snowflake, str(pipeline.koch_render_data_path))
    print(f"Exported render data to: {pipeline.koch_render_data_path}")

    status = snowflake.status()
    metadata = {
        'width': koch_config.width,
        'height': koch_config.height,
        'padding': koch_config.padding,
        'max_iterations': koch_config.max_iterations,
        'generation': status.generation,
        'segments': status.segment_count,
        'complete': status.complete,
        'perimeter': snowflake.perimeter,
        'render_data_path': str(pipeline.koch_render_data_path)
    }
    with open(pipeline.koch_metadata_path, 'w') as f:
        json.dump(metadata, f, indent=2)
    print(f"Saved metadata to {pipeline.koch_metadata_path}")

    print("\nKoch snowflake complete!")
    print(f"  Segments: {status.segment_count}")
    print(f"  Metadata: {pipeline.koch_metadata_path}")


if __name__ == '__main__':
    main()
