"""
Render every built-in pattern on a hard-edged board for review
"""
import argparse
import sys
from pathlib import Path

from tqdm import tqdm

sys.path.append(str(Path(__file__).parent.parent))

from life_curses.core import LifeBoard, RandomSource
from life_curses.evaluation import summarize_run
from life_curses.utils.patterns import PATTERN_CATEGORIES
from life_curses.utils.visualization import (
    visualize_state,
    visualize_trajectory,
    create_animation
)


def board_size_for(pattern_name):
    """Return (columns, rows, steps) large enough to show the pattern's behaviour."""
    if pattern_name == 'glider_gun':
        return 60, 40, 120
    if pattern_name == 'pulsar':
        return 21, 21, 30
    if pattern_name in ('glider', 'lwss'):
        return 30, 20, 60
    return 12, 12, 20


def main():
    """Simulate each pattern and save a still, a strip and a GIF."""
    parser = argparse.ArgumentParser(description='Render built-in Game of Life patterns')
    parser.add_argument('--output', type=str, default='figures/samples',
                        help='Directory for the generated figures')
    parser.add_argument('--no-animation', action='store_true',
                        help='Skip the GIF output')
    args = parser.parse_args()

    project_root = Path(__file__).parent.parent
    output_dir = project_root / args.output
    output_dir.mkdir(parents=True, exist_ok=True)

    jobs = [(category, name, pattern)
            for category, patterns in PATTERN_CATEGORIES.items()
            for name, pattern in patterns.items()]

    print("=" * 60)
    print(f"Rendering {len(jobs)} patterns to {output_dir}")
    print("=" * 60)

    for category, name, pattern in tqdm(jobs, desc="Patterns"):
        columns, rows, steps = board_size_for(name)
        board = LifeBoard(columns, rows, rng=RandomSource(0), randomize=False)
        board.place_pattern(pattern)
        trajectory = board.trajectory(steps)
        summary = summarize_run(trajectory)

        visualize_state(trajectory[0],
                        title=f"{name.upper()} (gen 0)",
                        save_path=output_dir / f"{name}_initial.png")
        visualize_trajectory(trajectory,
                             title=name.upper(),
                             save_path=output_dir / f"{name}_trajectory.png",
                             figsize=(18, 5) if name == 'glider_gun' else (16, 4))
        if not args.no_animation:
            create_animation(trajectory,
                             title=name.upper(),
                             save_path=output_dir / f"{name}_animation.gif")

        period = summary['period'] if summary['period'] > 0 else 'none'
        tqdm.write(f"  {category}/{name}: {columns}x{rows}, {steps} generations, "
                   f"final population {summary['final_population']}, period {period}")

    print("\n" + "=" * 60)
    print(f"All samples saved to: {output_dir.absolute()}")
    print("=" * 60)


if __name__ == "__main__":
    main()
