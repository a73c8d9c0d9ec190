"""
Data exporters to convert snowflake state into renderer-friendly format.
The renderer only ever sees these plain dicts, never the engine objects.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from koch import KochSnowflake


def snowflake_to_data(snowflake) -> Dict[str, Any]:
    """
    Snapshot the current boundary.

    Format:
    {
        "source_width": int,
        "source_height": int,
        "generation": int,
        "segments": [[[x1, y1], [x2, y2]], ...]   # traversal order, closed
    }
    """
    return {
        "source_width": snowflake.config.width,
        "source_height": snowflake.config.height,
        "generation": snowflake.generation,
        "segments": [
            [list(start), list(end)]
            for start, end in snowflake.get_segments()
        ]
    }


def export_koch_data(snowflake, output_path: str) -> Dict[str, Any]:
    """Export the current boundary to JSON for rendering."""
    data = snowflake_to_data(snowflake)

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(data, f)

    return data


def collect_generation_frames(config) -> List[Dict[str, Any]]:
    """Grow a fresh snowflake and snapshot every generation, the seed included."""
    snowflake = KochSnowflake(config)
    frames = [snowflake_to_data(snowflake)]
    while not snowflake.is_complete():
        snowflake.step()
        frames.append(snowflake_to_data(snowflake))
    return frames


def load_koch_data(path: str) -> Dict[str, Any]:
    with open(path, 'r') as f:
        return json.load(f)
