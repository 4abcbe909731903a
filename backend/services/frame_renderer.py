"""
Frame Rendering Service for the Snake Game

Draws a GameState snapshot onto a Pillow image:
- Title and score header
- Board with a green border
- Snake cells with a white outline
- Food cell
- Game-over overlay with a "Play Again" button, or the controls hint

The same image backs the interactive window, PNG frame dumps and replay
videos.
"""

import logging
import os
from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from domain.constants import CELL_SIZE
from domain.game_state import GameState

logger = logging.getLogger(__name__)

# Layout, in unscaled pixels
MARGIN = 24
CARD_PADDING = 32
HEADER_HEIGHT = 120
FOOTER_HEIGHT = 130
BOARD_BORDER = 2
BUTTON_WIDTH = 160
BUTTON_HEIGHT = 44


class ColorScheme:
    """Colour configuration of the game page"""

    PAGE_BG = "#111827"
    CARD_BG = "#1F2937"
    CARD_BORDER = "#374151"

    TITLE_TEXT = "#FB7185"
    LABEL_TEXT = "#9CA3AF"
    SCORE_TEXT = "#4ADE80"

    BOARD_BG = "#111827"
    BOARD_BORDER = "#4ADE80"
    SNAKE = "#4ADE80"
    SNAKE_OUTLINE = "#FFFFFF"
    FOOD = "#FB7185"

    GAME_OVER_TEXT = "#F43F5E"
    BUTTON_BG = "#F43F5E"
    BUTTON_TEXT = "#FFFFFF"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def _load_font(size: int):
    try:
        return ImageFont.truetype("DejaVuSans-Bold.ttf", size)
    except OSError:
        return ImageFont.load_default(size=size)


class FrameRenderer:
    """Render GameState snapshots to images"""

    def __init__(self, cell_size: int = CELL_SIZE, scale: int = 1):
        if cell_size <= 0:
            raise ValueError(f"Cell size must be positive, got {cell_size}.")
        if scale <= 0:
            raise ValueError(f"Scale must be positive, got {scale}.")
        self.cell_size = cell_size
        self.scale = scale

        self.font_title = _load_font(32)
        self.font_large = _load_font(28)
        self.font_medium = _load_font(20)
        self.font_small = _load_font(16)

    def board_size(self, snapshot: GameState) -> Tuple[int, int]:
        return snapshot.width * self.cell_size, snapshot.height * self.cell_size

    def frame_size(self, snapshot: GameState) -> Tuple[int, int]:
        """Size of the rendered image, including scaling"""
        board_w, board_h = self.board_size(snapshot)
        width = board_w + 2 * (CARD_PADDING + MARGIN)
        height = board_h + HEADER_HEIGHT + FOOTER_HEIGHT + 2 * MARGIN
        return width * self.scale, height * self.scale

    def board_origin(self) -> Tuple[int, int]:
        return MARGIN + CARD_PADDING, MARGIN + HEADER_HEIGHT

    def play_again_bounds(self, snapshot: GameState) -> Tuple[int, int, int, int]:
        """
        Bounding box (x0, y0, x1, y1) of the Play Again button in output
        pixels, so frontends can hit-test mouse clicks.
        """
        x0, y0, x1, y1 = self._button_box(snapshot)
        return x0 * self.scale, y0 * self.scale, x1 * self.scale, y1 * self.scale

    def _button_box(self, snapshot: GameState) -> Tuple[int, int, int, int]:
        width = self.frame_size(snapshot)[0] // self.scale
        _, board_h = self.board_size(snapshot)
        top = MARGIN + HEADER_HEIGHT + board_h + 64
        left = (width - BUTTON_WIDTH) // 2
        return left, top, left + BUTTON_WIDTH, top + BUTTON_HEIGHT

    def render(self, snapshot: GameState) -> Image.Image:
        """Render a single frame of the game"""
        width, height = self.frame_size(snapshot)
        width //= self.scale
        height //= self.scale

        img = Image.new('RGB', (width, height), hex_to_rgb(ColorScheme.PAGE_BG))
        draw = ImageDraw.Draw(img)

        # Card
        draw.rounded_rectangle(
            [MARGIN, MARGIN, width - MARGIN, height - MARGIN],
            radius=12,
            fill=hex_to_rgb(ColorScheme.CARD_BG),
            outline=hex_to_rgb(ColorScheme.CARD_BORDER),
            width=2
        )

        self._draw_header(draw, width, snapshot.score)
        self._draw_board(draw, snapshot)

        if snapshot.is_game_over:
            self._draw_game_over(draw, width, snapshot)
        else:
            _, board_h = self.board_size(snapshot)
            self._draw_centered_text(
                draw,
                width,
                MARGIN + HEADER_HEIGHT + board_h + 36,
                "Use arrow keys to move.",
                self.font_small,
                ColorScheme.LABEL_TEXT
            )

        if self.scale != 1:
            img = img.resize((width * self.scale, height * self.scale), Image.NEAREST)
        return img

    def save(self, snapshot: GameState, path: str) -> str:
        """Render a snapshot and write it to ``path`` as PNG"""
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self.render(snapshot).save(path, format="PNG")
        logger.debug(f"Saved frame for tick {snapshot.tick_number} to {path}")
        return path

    def _draw_header(self, draw: ImageDraw.ImageDraw, width: int, score: int):
        self._draw_centered_text(
            draw, width, MARGIN + 24, "Snake Game", self.font_title, ColorScheme.TITLE_TEXT
        )

        label = "Score: "
        value = str(score)
        label_w = self._text_width(draw, label, self.font_medium)
        value_w = self._text_width(draw, value, self.font_medium)
        x = (width - label_w - value_w) // 2
        y = MARGIN + 72
        draw.text((x, y), label, fill=hex_to_rgb(ColorScheme.LABEL_TEXT), font=self.font_medium)
        draw.text((x + label_w, y), value, fill=hex_to_rgb(ColorScheme.SCORE_TEXT), font=self.font_medium)

    def _draw_board(self, draw: ImageDraw.ImageDraw, snapshot: GameState):
        board_x, board_y = self.board_origin()
        board_w, board_h = self.board_size(snapshot)

        draw.rectangle(
            [board_x - BOARD_BORDER, board_y - BOARD_BORDER,
             board_x + board_w + BOARD_BORDER - 1, board_y + board_h + BOARD_BORDER - 1],
            fill=hex_to_rgb(ColorScheme.BOARD_BG),
            outline=hex_to_rgb(ColorScheme.BOARD_BORDER),
            width=BOARD_BORDER
        )

        for x, y in snapshot.snake:
            self._draw_cell(
                draw,
                board_x + x * self.cell_size,
                board_y + y * self.cell_size,
                hex_to_rgb(ColorScheme.SNAKE),
                outline=hex_to_rgb(ColorScheme.SNAKE_OUTLINE)
            )

        food_x, food_y = snapshot.food
        self._draw_cell(
            draw,
            board_x + food_x * self.cell_size,
            board_y + food_y * self.cell_size,
            hex_to_rgb(ColorScheme.FOOD)
        )

    def _draw_game_over(self, draw: ImageDraw.ImageDraw, width: int, snapshot: GameState):
        _, board_h = self.board_size(snapshot)
        self._draw_centered_text(
            draw,
            width,
            MARGIN + HEADER_HEIGHT + board_h + 20,
            "Game Over!",
            self.font_large,
            ColorScheme.GAME_OVER_TEXT
        )

        x0, y0, x1, y1 = self._button_box(snapshot)
        draw.rounded_rectangle(
            [x0, y0, x1, y1],
            radius=BUTTON_HEIGHT // 2,
            fill=hex_to_rgb(ColorScheme.BUTTON_BG)
        )
        label = "Play Again"
        bbox = draw.textbbox((0, 0), label, font=self.font_medium)
        text_w = bbox[2] - bbox[0]
        text_h = bbox[3] - bbox[1]
        draw.text(
            (x0 + (BUTTON_WIDTH - text_w) // 2 - bbox[0], y0 + (BUTTON_HEIGHT - text_h) // 2 - bbox[1]),
            label,
            fill=hex_to_rgb(ColorScheme.BUTTON_TEXT),
            font=self.font_medium
        )

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        x: int,
        y: int,
        color: Tuple[int, int, int],
        outline: Tuple[int, int, int] = None
    ):
        """Draw a single cell (for snake segments or food)"""
        draw.rectangle(
            [x, y, x + self.cell_size - 1, y + self.cell_size - 1],
            fill=color,
            outline=outline
        )

    def _text_width(self, draw: ImageDraw.ImageDraw, text: str, font) -> int:
        bbox = draw.textbbox((0, 0), text, font=font)
        return bbox[2] - bbox[0]

    def _draw_centered_text(
        self,
        draw: ImageDraw.ImageDraw,
        width: int,
        y: int,
        text: str,
        font,
        color: str
    ):
        text_width = self._text_width(draw, text, font)
        draw.text((width // 2 - text_width // 2, y), text, fill=hex_to_rgb(color), font=font)
