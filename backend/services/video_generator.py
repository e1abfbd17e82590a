"""
Frame rendering and video export for snake games.

This service turns GameSnapshots into images by:
1. Rendering each frame using PIL (Pillow)
2. Encoding recorded frames to video using MoviePy/FFmpeg

A frame shows:
- The board with grid lines
- Snake body, and the head with eyes facing the direction of travel
- The food
- A status bar with score, length and state
"""

import logging
from typing import List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont
from moviepy import ImageSequenceClip
import numpy as np

from domain.game_state import GameSnapshot, GameState
from .renderer import Renderer

logger = logging.getLogger(__name__)

# Video settings
DEFAULT_FPS = 10
CELL_SIZE = 24  # Size of each grid cell in pixels
STATUS_BAR_HEIGHT = 32


class ColorScheme:
    """Board colors"""

    SNAKE = "#32CD32"  # lime
    SNAKE_HEAD = "#00FF00"
    FOOD = "#FF0000"

    BACKGROUND = "#FFFFFF"
    GRID_LINE = "#E5E7EB"

    STATUS_BG = "#1A1F2E"
    STATUS_TEXT = "#FFFFFF"
    GAME_OVER_TEXT = "#EA2014"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def darken_color(hex_color: str, amount: float = 0.3) -> Tuple[int, int, int]:
    """Darken a hex color by a given amount"""
    r, g, b = hex_to_rgb(hex_color)
    r = max(0, int(r * (1 - amount)))
    g = max(0, int(g * (1 - amount)))
    b = max(0, int(b * (1 - amount)))
    return (r, g, b)


class FrameRenderer(Renderer):
    """
    Paints snapshots to PIL images and optionally records them for export.

    Ticks are not painted cell by cell; every move repaints the whole frame
    from the snapshot handed over by the host.
    """

    def __init__(self, cell_size: int = CELL_SIZE, fps: int = DEFAULT_FPS, record: bool = True):
        self.cell_size = cell_size
        self.fps = fps
        self.record = record
        self.frames: List[Image.Image] = []
        self.last_frame: Optional[Image.Image] = None
        self.font = ImageFont.load_default()

    def image_size(self, rows: int, cols: int) -> Tuple[int, int]:
        return (cols * self.cell_size, rows * self.cell_size + STATUS_BAR_HEIGHT)

    def render_frame(self, snapshot: GameSnapshot) -> Image.Image:
        """Render a single frame of the game"""
        img = Image.new('RGB', self.image_size(snapshot.rows, snapshot.cols), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        self._draw_grid(draw, snapshot.rows, snapshot.cols)

        if snapshot.food is not None:
            self._draw_cell(draw, snapshot.food, hex_to_rgb(ColorScheme.FOOD), padding=2)

        # Draw body
        for cell in snapshot.snake[1:]:
            self._draw_cell(
                draw, cell, hex_to_rgb(ColorScheme.SNAKE), padding=1,
                outline=darken_color(ColorScheme.SNAKE, 0.3)
            )

        # Draw head with eyes
        self._draw_cell(draw, snapshot.head, hex_to_rgb(ColorScheme.SNAKE_HEAD), padding=0)
        self._draw_eyes(draw, snapshot.head, snapshot.direction)

        self._draw_status(draw, snapshot)
        return img

    def _draw_grid(self, draw: ImageDraw.ImageDraw, rows: int, cols: int):
        width = cols * self.cell_size
        height = rows * self.cell_size
        for i in range(cols + 1):
            x = i * self.cell_size
            draw.line([x, 0, x, height], fill=hex_to_rgb(ColorScheme.GRID_LINE), width=1)
        for i in range(rows + 1):
            y = i * self.cell_size
            draw.line([0, y, width, y], fill=hex_to_rgb(ColorScheme.GRID_LINE), width=1)

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        cell: Tuple[int, int],
        color: Tuple[int, int, int],
        padding: int = 1,
        outline: Optional[Tuple[int, int, int]] = None
    ):
        """Draw a single cell (for snake segment or food)"""
        x = cell[0] * self.cell_size
        y = cell[1] * self.cell_size
        size = self.cell_size
        draw.rectangle(
            [x + padding, y + padding, x + size - 1 - padding, y + size - 1 - padding],
            fill=color,
            outline=outline
        )

    def _draw_eyes(self, draw: ImageDraw.ImageDraw, head: Tuple[int, int], direction: Tuple[int, int]):
        size = self.cell_size
        eye_size = max(2, size // 5)
        x = head[0] * size
        y = head[1] * size
        dx, dy = direction

        # Eyes sit toward the leading edge; a stationary head looks up
        if dx == 0 and dy == 0:
            dy = -1
        if dx != 0:
            eye_x = x + (3 * size // 4 - eye_size if dx > 0 else size // 4)
            eyes = [(eye_x, y + size // 4), (eye_x, y + 3 * size // 4 - eye_size)]
        else:
            eye_y = y + (3 * size // 4 - eye_size if dy > 0 else size // 4)
            eyes = [(x + size // 4, eye_y), (x + 3 * size // 4 - eye_size, eye_y)]

        for ex, ey in eyes:
            draw.ellipse([ex, ey, ex + eye_size, ey + eye_size], fill=(255, 255, 255))

    def _draw_status(self, draw: ImageDraw.ImageDraw, snapshot: GameSnapshot):
        top = snapshot.rows * self.cell_size
        width = snapshot.cols * self.cell_size
        draw.rectangle([0, top, width, top + STATUS_BAR_HEIGHT], fill=hex_to_rgb(ColorScheme.STATUS_BG))

        if snapshot.state is GameState.GAME_OVER:
            text = f"Game over ({snapshot.death_reason}) - score {snapshot.score}"
            color = ColorScheme.GAME_OVER_TEXT
        else:
            text = f"Score: {snapshot.score} | Length: {len(snapshot.snake)} | {snapshot.state.value}"
            color = ColorScheme.STATUS_TEXT
        draw.text((8, top + 10), text, fill=hex_to_rgb(color), font=self.font)

    def draw_full(self, snapshot: GameSnapshot):
        self.last_frame = self.render_frame(snapshot)
        if self.record:
            self.frames.append(self.last_frame)

    def draw_tick(self, result, snapshot: GameSnapshot):
        self.draw_full(snapshot)

    def write_video(self, output_path: str, frames: Optional[Sequence[Image.Image]] = None) -> str:
        """
        Encode recorded frames into a video file

        Args:
            output_path: Destination file (.mp4 or .gif)
            frames: Frames to encode (defaults to the recorded ones)

        Returns:
            Path to the generated video file
        """
        frames = list(self.frames if frames is None else frames)
        if not frames:
            raise ValueError("No frames recorded; nothing to encode")

        logger.info(f"Encoding {len(frames)} frames to {output_path}")
        clip = ImageSequenceClip([np.array(frame) for frame in frames], fps=self.fps)
        if output_path.lower().endswith(".gif"):
            clip.write_gif(output_path, fps=self.fps, logger=None)
        else:
            clip.write_videofile(output_path, codec='libx264', audio=False, logger=None)

        logger.info(f"Video created successfully at {output_path}")
        return output_path

    def close(self):
        self.frames = []
        self.last_frame = None
