"""
Demo script for rendering pre-exported Koch snowflake data.

This script only loads and renders - no subdivision code.
First run main_koch.py to generate the render data.

Run from project root:
    python -m rendering.demo_koch
"""

from pathlib import Path

from config.render_config import KochRenderConfig
from rendering.exporters import load_koch_data
from rendering.koch_renderer import KochRenderer


def main():
    print("=== Koch Rendering Demo ===\n")

    data_path = "outputs/koch/kochsnowflake_render_data.json"

    if not Path(data_path).exists():
        print(f"Error: Data file not found: {data_path}")
        print("Run main_koch.py first to generate render data.")
        return

    print(f"Loading data from: {data_path}")
    data = load_koch_data(data_path)
    print(f"  Source resolution: {data['source_width']}x{data['source_height']}")
    print(f"  Generation: {data['generation']}")
    print(f"  Segments: {len(data['segments'])}")

    output_dir = Path("outputs/rendering")
    output_dir.mkdir(parents=True, exist_ok=True)

    res = 2048
    config = KochRenderConfig(
        output_width=res,
        output_height=res * data['source_height'] // data['source_width'],
        line_width=res / 1024,
    )
    renderer = KochRenderer(config)

    print("\nRendering high-resolution frame...")
    renderer.save_frame(data, str(output_dir / "koch_demo.png"))

    print("\n=== Done ===")


if __name__ == "__main__":
    main()
