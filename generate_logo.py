#!/usr/bin/env python3
"""Render the robot logo: a still PNG and a looping GIF of the antenna."""

from logo_surface import PillowSurface
from robot_logo import FULL_TURN, SIZE, initialize, render_frame

SCALE = 4
FPS = 60


def cycle_length(state):
    """Frames needed for the antenna angle to come back to its start."""
    return round(FULL_TURN / state.animation.step)


def render_frames(count, size=SIZE, scale=SCALE):
    state = initialize(size)
    frames = []
    for _ in range(count):
        surface = PillowSurface(size, scale)
        state = render_frame(surface, state)
        frames.append(surface.image())
    return frames


def save_gif(frames, path, fps=FPS):
    frames[0].save(
        path,
        "GIF",
        save_all=True,
        append_images=frames[1:],
        duration=round(1000 / fps),
        loop=0,
    )


def main():
    out_dir = "."
    frames = render_frames(cycle_length(initialize()))

    name = "robot-logo.png"
    frames[0].save(f"{out_dir}/{name}", "PNG")
    print(f"Wrote {name}")

    name = "robot-logo.gif"
    save_gif(frames, f"{out_dir}/{name}")
    print(f"Wrote {name}")


if __name__ == "__main__":
    main()
