"""
Matplotlib figures for boards and trajectories
"""
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation, PillowWriter
from typing import Optional


def _draw_board(ax, state: np.ndarray, show_grid: bool = True, animated: bool = False):
    """Draw one board on an axis and return the image artist."""
    im = ax.imshow(np.asarray(state, dtype=np.uint8), cmap='binary', interpolation='nearest',
                   vmin=0, vmax=1, animated=animated)
    if show_grid:
        h, w = state.shape
        ax.set_xticks(np.arange(-0.5, w, 1), minor=True)
        ax.set_yticks(np.arange(-0.5, h, 1), minor=True)
        ax.grid(which='minor', color='gray', linestyle='-', linewidth=0.5, alpha=0.3)
        ax.tick_params(which='minor', length=0)
    ax.set_xticks([])
    ax.set_yticks([])
    return im


def _finish(fig, save_path, message: str) -> None:
    if save_path:
        fig.savefig(save_path, dpi=200, bbox_inches='tight')
        print(f"{message} {save_path}")
    else:
        plt.show()
    plt.close(fig)


def visualize_state(state: np.ndarray,
                    title: str = "Game of Life",
                    save_path: Optional[str] = None,
                    figsize: tuple = (8, 8),
                    show_grid: bool = True) -> None:
    """
    Plot a single board.

    Args:
        state: Board array (H x W)
        title: Plot title
        save_path: Path to save figure, None for display only
        figsize: Figure size
        show_grid: Whether to show cell borders
    """
    fig, ax = plt.subplots(figsize=figsize)
    _draw_board(ax, state, show_grid)
    ax.set_title(f"{title} (population {int(np.count_nonzero(state))})", fontsize=16, pad=10)
    fig.tight_layout()
    _finish(fig, save_path, "Saved to")


def visualize_trajectory(trajectory: np.ndarray,
                         title: str = "Board",
                         save_path: Optional[str] = None,
                         figsize: tuple = (16, 4),
                         num_frames_to_show: int = 8,
                         show_grid: bool = True) -> None:
    """
    Plot evenly spaced generations from a trajectory side by side.

    Args:
        trajectory: Trajectory array (T, H, W)
        title: Figure title prefix
        save_path: Path to save figure
        figsize: Figure size
        num_frames_to_show: Number of generations to display
        show_grid: Whether to show cell borders
    """
    num_frames = min(num_frames_to_show, len(trajectory))
    indices = np.linspace(0, len(trajectory) - 1, num_frames, dtype=int)

    fig, axes = plt.subplots(1, num_frames, figsize=figsize)
    axes = np.atleast_1d(axes)

    for ax, idx in zip(axes, indices):
        _draw_board(ax, trajectory[idx], show_grid)
        ax.set_title(f"gen {idx}", fontsize=12)

    fig.suptitle(f"{title} Evolution", fontsize=16)
    fig.tight_layout()
    _finish(fig, save_path, "Saved trajectory to")


def create_animation(trajectory: np.ndarray,
                     title: str = "Board",
                     save_path: Optional[str] = None,
                     fps: int = 10,
                     figsize: tuple = (8, 8),
                     show_grid: bool = True) -> None:
    """
    Animate a trajectory, saving a GIF when save_path is given.

    Args:
        trajectory: Trajectory array (T, H, W)
        title: Title prefix shown above each frame
        save_path: Path to save GIF file
        fps: Frames per second
        figsize: Figure size
        show_grid: Whether to show cell borders
    """
    fig, ax = plt.subplots(figsize=figsize)
    im = _draw_board(ax, trajectory[0], show_grid, animated=True)
    label = ax.set_title(f"{title} - Generation 0", fontsize=16)

    def update(frame):
        im.set_array(np.asarray(trajectory[frame], dtype=np.uint8))
        label.set_text(f"{title} - Generation {frame}")
        return [im, label]

    anim = FuncAnimation(fig, update, frames=len(trajectory),
                         interval=1000 // fps, blit=True, repeat=True)

    if save_path:
        anim.save(save_path, writer=PillowWriter(fps=fps))
        print(f"Saved animation to {save_path}")
    else:
        plt.show()
    plt.close(fig)
