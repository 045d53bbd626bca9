from typing import Optional, Tuple

from PIL import Image, ImageDraw

from grid_life.grid import Grid
from grid_life.position import Position

DEFAULT_CELL_SIZE = 10
DEFAULT_FILL_COLOR: Tuple[int, int, int, int] = (0x22, 0x22, 0x22, 255)
DEFAULT_BACKGROUND_COLOR: Tuple[int, int, int, int] = (0, 0, 0, 0)

Color = Tuple[int, int, int, int]


class GridCanvas:
    """Pillow-backed drawing surface painting one square per living cell."""

    cell_size: int
    fill_color: Color
    background_color: Color

    def __init__(
        self,
        width: int,
        height: int,
        cell_size: int = DEFAULT_CELL_SIZE,
        fill_color: Color = DEFAULT_FILL_COLOR,
        background_color: Color = DEFAULT_BACKGROUND_COLOR,
    ):
        if cell_size < 1:
            raise ValueError(f"Cell size must be positive, got {cell_size}")
        self.cell_size = cell_size
        self.fill_color = fill_color
        self.background_color = background_color
        self._image = self._new_surface(width, height)

    @classmethod
    def for_grid(
        cls, grid_size: int, cell_size: int = DEFAULT_CELL_SIZE
    ) -> "GridCanvas":
        return cls(grid_size * cell_size, grid_size * cell_size, cell_size=cell_size)

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    def clear(self) -> None:
        """Erase the whole surface to the background color."""
        ImageDraw.Draw(self._image).rectangle(
            (0, 0, self.width, self.height), fill=self.background_color
        )

    def resize(self, width: int, height: int) -> None:
        """Replace the surface with an empty one of the given pixel size."""
        self._image = self._new_surface(width, height)

    def close(self) -> None:
        """Release the surface; the canvas must not be painted afterwards."""
        self._image.close()

    def resize_to_grid(self, grid_size: int) -> None:
        self.resize(grid_size * self.cell_size, grid_size * self.cell_size)

    def paint_grid(self, grid: Grid) -> None:
        self.clear()
        draw = ImageDraw.Draw(self._image)
        for pos in grid.living_cells():
            self._paint_cell(draw, pos)

    def _paint_cell(self, draw: ImageDraw.ImageDraw, pos: Position) -> None:
        x0, y0 = pos.x * self.cell_size, pos.y * self.cell_size
        # Pillow rectangles include their end coordinate.
        draw.rectangle(
            (x0, y0, x0 + self.cell_size - 1, y0 + self.cell_size - 1),
            fill=self.fill_color,
        )

    def _new_surface(self, width: int, height: int) -> Image.Image:
        if width < 1 or height < 1:
            raise ValueError(
                f"Canvas dimensions must be positive, got {width}x{height}"
            )
        return Image.new("RGBA", (width, height), self.background_color)


def render(
    grid: Grid,
    cell_size: int = DEFAULT_CELL_SIZE,
    canvas: Optional[GridCanvas] = None,
) -> Image.Image:
    """Render ``grid`` to a new image sized to fit the whole board."""
    if canvas is None:
        canvas = GridCanvas.for_grid(grid.size, cell_size)
    canvas.paint_grid(grid)
    return canvas.image.copy()
