"""
Visualization utilities for the Koch snowflake.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from matplotlib.animation import FuncAnimation
from typing import Dict, List, Optional, Tuple
from pathlib import Path

from config.koch_config import KochConfig
from .snowflake import KochSnowflake


def _style_axes(ax, width: int, height: int, title: str):
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect('equal')
    ax.set_facecolor('black')
    ax.set_xticks([])
    ax.set_yticks([])
    return ax.set_title(title)


def visualize_snowflake(
    snowflake: KochSnowflake,
    line_color: str = 'red',
    line_width: float = 1.0,
    figsize: Tuple[int, int] = (12, 9),
    save_path: Optional[str] = None,
    show: bool = True
):
    """Visualize the current boundary of the snowflake."""
    config = snowflake.config
    fig, ax = plt.subplots(figsize=figsize)

    lc = LineCollection(snowflake.get_segments(), colors=line_color, linewidths=line_width)
    ax.add_collection(lc)

    _style_axes(ax, config.width, config.height,
                f"{config.title} - generation {snowflake.generation}")
    fig.text(0.5, 0.02, config.copyright, ha='center', fontsize=8)

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight',
                    facecolor='white', edgecolor='none')
        print(f"Saved visualization to {save_path}")

    if show:
        plt.show()
    return fig, ax


def growth_snapshot(snowflake: KochSnowflake) -> Dict:
    return {
        'generation': snowflake.generation,
        'segments': snowflake.segment_count,
        'perimeter': snowflake.perimeter,
    }


def collect_growth_history(snowflake: KochSnowflake, delay: Optional[float] = 0) -> List[Dict]:
    """
    Grow the snowflake to completion and record per-generation metrics.
    The starting generation is included as the first entry.

    delay is passed to KochSnowflake.grow; None uses the configured pacing.
    """
    history = [growth_snapshot(snowflake)]
    snowflake.grow(callback=lambda s, generation: history.append(growth_snapshot(s)),
                   delay=delay)
    return history


def animate_growth(
    config: KochConfig,
    interval: Optional[int] = None,
    line_color: str = 'red',
    line_width: float = 1.0,
    figsize: Tuple[int, int] = (12, 9),
    save_path: Optional[str] = None,
    show: bool = True
) -> FuncAnimation:
    """
    Animate the snowflake growing one generation per frame.

    interval: ms between frames; defaults to the configured thread_sleep_time.
    """
    if interval is None:
        interval = config.thread_sleep_time

    snowflake = KochSnowflake(config)

    fig, ax = plt.subplots(figsize=figsize)
    line_collection = LineCollection([], colors=line_color, linewidths=line_width)
    ax.add_collection(line_collection)
    title = _style_axes(ax, config.width, config.height, f"{config.title} - generation 0")

    frames_data = [{'segments': snowflake.get_segments(), 'generation': 0}]
    while not snowflake.is_complete():
        snowflake.step()
        frames_data.append({
            'segments': snowflake.get_segments(),
            'generation': snowflake.generation
        })

    print(f"Collected {len(frames_data)} frames for animation")

    def init():
        line_collection.set_segments([])
        return [line_collection]

    def update(frame_idx):
        data = frames_data[frame_idx]
        line_collection.set_segments(data['segments'])
        title.set_text(f"{config.title} - generation {data['generation']}")
        return [line_collection]

    anim = FuncAnimation(
        fig, update,
        frames=len(frames_data),
        init_func=init,
        interval=interval,
        blit=False,
        repeat=True
    )

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        print(f"Saving animation ({len(frames_data)} frames)...")
        fps = max(1, int(round(1000 / interval))) if interval > 0 else 1
        anim.save(save_path, writer='pillow', fps=fps)
        print(f"Saved animation to {save_path}")

    if show:
        plt.show()
    return anim


def plot_growth_statistics(history: List[Dict], save_path: Optional[str] = None, show: bool = True):
    """Plot segment count and perimeter against generation."""
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    generations = np.array([h['generation'] for h in history])
    segments = np.array([h['segments'] for h in history])
    perimeters = np.array([h['perimeter'] for h in history])

    axes[0].bar(generations, segments, color='firebrick', edgecolor='black')
    axes[0].set_yscale('log')
    axes[0].set_xlabel('Generation')
    axes[0].set_ylabel('Segments')
    axes[0].set_title('Segments per Generation')

    axes[1].plot(generations, perimeters, marker='o', color='darkorange', label='measured')
    if len(perimeters) > 0:
        expected = perimeters[0] * (4 / 3) ** (generations - generations[0])
        axes[1].plot(generations, expected, linestyle='--', color='gray', label='(4/3)^g')
    axes[1].set_xlabel('Generation')
    axes[1].set_ylabel('Perimeter (px)')
    axes[1].set_title('Perimeter Growth')
    axes[1].legend()

    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Saved statistics to {save_path}")

    if show:
        plt.show()
    return fig, axes
