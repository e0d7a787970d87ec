"""PNG rendering of mazes with Pillow."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from PIL import Image, ImageDraw

from ..distances import Distances
from ..grid import Grid
from ..kinds import Hex, Polar, SquareKind, Triangle, Weave

PathLike = Union[str, Path]
Color = Tuple[int, int, int]

BACKGROUND_COLOR = (255, 255, 255)
WALL_COLOR = (0, 0, 0)
WEAVE_INSET = 0.1


def background_for(
    distances: Optional[Distances], cell: Any, maximum: Optional[int] = None
) -> Optional[Color]:
    """Green shade fading with distance from the root; None for uncoloured cells.

    Renderers pass ``maximum`` (the farthest distance) so it is found once per image.
    """

    if distances is None or cell not in distances:
        return None
    if maximum is None:
        _, maximum = distances.max()
    if maximum == 0:
        intensity = 1.0
    else:
        intensity = (maximum - distances[cell]) / maximum
    dark = int(round(255 * intensity))
    bright = 128 + int(127 * intensity)
    return (dark, bright, dark)


def render_png(grid: Grid, *, cell_size: int = 25, inset: float = 0.0) -> Image.Image:
    """Draw ``grid`` as an image, colouring cells by :meth:`Grid.distances` if set."""

    if cell_size < 2:
        raise ValueError(f"cell_size must be at least 2 pixels, got {cell_size}")
    if not 0.0 <= inset < 0.5:
        raise ValueError(f"inset must be within [0, 0.5), got {inset}")

    kind = grid.kind
    if isinstance(kind, Polar):
        return _render_polar(grid, cell_size)
    if isinstance(kind, Hex):
        return _render_hex(grid, cell_size)
    if isinstance(kind, Triangle):
        return _render_triangle(grid, cell_size)
    if isinstance(kind, Weave):
        return _render_square(grid, cell_size, inset or WEAVE_INSET)
    if isinstance(kind, SquareKind):
        return _render_square(grid, cell_size, inset)
    raise TypeError(f"No PNG renderer for {type(kind).__name__} grids")


def save_png(grid: Grid, path: PathLike, *, cell_size: int = 25, inset: float = 0.0) -> Path:
    destination = Path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    render_png(grid, cell_size=cell_size, inset=inset).save(destination)
    return destination


# ----------------------------------------------------------------------
# square and weave


def _render_square(grid: Grid, cell_size: int, inset: float) -> Image.Image:
    width = cell_size * grid.num_cols
    height = cell_size * grid.num_rows
    image = Image.new("RGB", (width + 1, height + 1), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)
    distances = grid.distances()
    maximum = distances.max()[1] if distances is not None else None
    inset_px = int(cell_size * inset)

    for cell in grid.cells():
        color = background_for(distances, cell, maximum)
        if color is None:
            continue
        x, y = cell.col * cell_size, cell.row * cell_size
        if inset_px:
            _fill_inset(draw, grid, cell, x, y, cell_size, inset_px, color)
        else:
            draw.rectangle((x, y, x + cell_size, y + cell_size), fill=color)

    for cell in grid.cells():
        x, y = cell.col * cell_size, cell.row * cell_size
        if inset_px:
            _walls_inset(draw, grid, cell, x, y, cell_size, inset_px)
        else:
            _walls_plain(draw, grid, cell, x, y, cell_size)
    return image


def _walls_plain(draw: ImageDraw.ImageDraw, grid: Grid, cell: Any, x: int, y: int, size: int) -> None:
    x2, y2 = x + size, y + size
    if grid.north(cell) is None:
        draw.line((x, y, x2, y), fill=WALL_COLOR)
    if grid.west(cell) is None:
        draw.line((x, y, x, y2), fill=WALL_COLOR)
    east = grid.east(cell)
    if east is None or not grid.are_linked(cell, east):
        draw.line((x2, y, x2, y2), fill=WALL_COLOR)
    south = grid.south(cell)
    if south is None or not grid.are_linked(cell, south):
        draw.line((x, y2, x2, y2), fill=WALL_COLOR)


def _inset_coordinates(x: int, y: int, size: int, inset: int) -> Tuple[int, ...]:
    x1, x4 = x, x + size
    y1, y4 = y, y + size
    return x1, x1 + inset, x4 - inset, x4, y1, y1 + inset, y4 - inset, y4


def _fill_inset(
    draw: ImageDraw.ImageDraw,
    grid: Grid,
    cell: Any,
    x: int,
    y: int,
    size: int,
    inset: int,
    color: Color,
) -> None:
    x1, x2, x3, x4, y1, y2, y3, y4 = _inset_coordinates(x, y, size, inset)
    under = getattr(cell, "is_under", False)
    if not under:
        draw.rectangle((x2, y2, x3, y3), fill=color)
    if Weave.linked_towards(grid, cell, -1, 0):
        draw.rectangle((x2, y1, x3, y2), fill=color)
    if Weave.linked_towards(grid, cell, 1, 0):
        draw.rectangle((x2, y3, x3, y4), fill=color)
    if Weave.linked_towards(grid, cell, 0, -1):
        draw.rectangle((x1, y2, x2, y3), fill=color)
    if Weave.linked_towards(grid, cell, 0, 1):
        draw.rectangle((x3, y2, x4, y3), fill=color)


def _walls_inset(draw: ImageDraw.ImageDraw, grid: Grid, cell: Any, x: int, y: int, size: int, inset: int) -> None:
    x1, x2, x3, x4, y1, y2, y3, y4 = _inset_coordinates(x, y, size, inset)

    if getattr(cell, "is_under", False):
        # only the tunnel mouths show; the passage above hides the rest
        if Weave.linked_towards(grid, cell, -1, 0):
            draw.line((x2, y1, x2, y2), fill=WALL_COLOR)
            draw.line((x3, y1, x3, y2), fill=WALL_COLOR)
            draw.line((x2, y3, x2, y4), fill=WALL_COLOR)
            draw.line((x3, y3, x3, y4), fill=WALL_COLOR)
        else:
            draw.line((x1, y2, x2, y2), fill=WALL_COLOR)
            draw.line((x1, y3, x2, y3), fill=WALL_COLOR)
            draw.line((x3, y2, x4, y2), fill=WALL_COLOR)
            draw.line((x3, y3, x4, y3), fill=WALL_COLOR)
        return

    if Weave.linked_towards(grid, cell, -1, 0):
        draw.line((x2, y1, x2, y2), fill=WALL_COLOR)
        draw.line((x3, y1, x3, y2), fill=WALL_COLOR)
    else:
        draw.line((x2, y2, x3, y2), fill=WALL_COLOR)
    if Weave.linked_towards(grid, cell, 1, 0):
        draw.line((x2, y3, x2, y4), fill=WALL_COLOR)
        draw.line((x3, y3, x3, y4), fill=WALL_COLOR)
    else:
        draw.line((x2, y3, x3, y3), fill=WALL_COLOR)
    if Weave.linked_towards(grid, cell, 0, -1):
        draw.line((x1, y2, x2, y2), fill=WALL_COLOR)
        draw.line((x1, y3, x2, y3), fill=WALL_COLOR)
    else:
        draw.line((x2, y2, x2, y3), fill=WALL_COLOR)
    if Weave.linked_towards(grid, cell, 0, 1):
        draw.line((x3, y2, x4, y2), fill=WALL_COLOR)
        draw.line((x3, y3, x4, y3), fill=WALL_COLOR)
    else:
        draw.line((x3, y2, x3, y3), fill=WALL_COLOR)


# ----------------------------------------------------------------------
# polar


def _render_polar(grid: Grid, cell_size: int) -> Image.Image:
    kind: Polar = grid.kind
    image_size = 2 * kind.rows * cell_size
    center = image_size / 2
    image = Image.new("RGB", (image_size + 1, image_size + 1), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)
    distances = grid.distances()
    maximum = distances.max()[1] if distances is not None else None

    def point(radius: float, theta: float) -> Tuple[float, float]:
        return center + radius * math.cos(theta), center + radius * math.sin(theta)

    for cell in grid.cells():
        color = background_for(distances, cell, maximum)
        if color is None:
            continue
        if cell.row == 0:
            draw.ellipse(
                (center - cell_size, center - cell_size, center + cell_size, center + cell_size),
                fill=color,
            )
            continue
        theta = 2 * math.pi / kind.row_length(cell.row)
        inner, outer = cell.row * cell_size, (cell.row + 1) * cell_size
        steps = 8
        angles = [cell.col * theta + theta * step / steps for step in range(steps + 1)]
        outline: List[Tuple[float, float]] = [point(inner, angle) for angle in angles]
        outline += [point(outer, angle) for angle in reversed(angles)]
        draw.polygon(outline, fill=color)

    for cell in grid.cells():
        if cell.row == 0:
            continue
        theta = 2 * math.pi / kind.row_length(cell.row)
        inner, outer = cell.row * cell_size, (cell.row + 1) * cell_size
        theta_ccw, theta_cw = cell.col * theta, (cell.col + 1) * theta
        a = point(inner, theta_ccw)
        c = point(inner, theta_cw)
        d = point(outer, theta_cw)

        inward = kind.inward(grid, cell)
        if inward is None or not grid.are_linked(cell, inward):
            draw.line((a, c), fill=WALL_COLOR)
        clockwise = kind.clockwise(grid, cell)
        if clockwise is None or not grid.are_linked(cell, clockwise):
            draw.line((c, d), fill=WALL_COLOR)

    radius = kind.rows * cell_size
    draw.ellipse((center - radius, center - radius, center + radius, center + radius), outline=WALL_COLOR)
    return image


# ----------------------------------------------------------------------
# hex


def _render_hex(grid: Grid, cell_size: int) -> Image.Image:
    kind: Hex = grid.kind
    a_size = cell_size / 2.0
    b_size = cell_size * math.sqrt(3) / 2.0
    height = b_size * 2
    image_width = int(3 * a_size * kind.cols + a_size + 0.5)
    image_height = int(height * kind.rows + b_size + 0.5)
    image = Image.new("RGB", (image_width + 1, image_height + 1), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)
    distances = grid.distances()
    maximum = distances.max()[1] if distances is not None else None

    def corners(cell: Any) -> Tuple[float, ...]:
        cx = cell_size + 3 * cell.col * a_size
        cy = b_size + cell.row * height + (b_size if cell.col % 2 else 0)
        return (
            cx - cell_size,
            cx - a_size,
            cx + a_size,
            cx + cell_size,
            cy - b_size,
            cy,
            cy + b_size,
        )

    for cell in grid.cells():
        color = background_for(distances, cell, maximum)
        if color is None:
            continue
        x_fw, x_nw, x_ne, x_fe, y_n, y_m, y_s = corners(cell)
        draw.polygon(
            [(x_fw, y_m), (x_nw, y_n), (x_ne, y_n), (x_fe, y_m), (x_ne, y_s), (x_nw, y_s)],
            fill=color,
        )

    for cell in grid.cells():
        x_fw, x_nw, x_ne, x_fe, y_n, y_m, y_s = corners(cell)
        if kind.south_west(grid, cell) is None:
            draw.line((x_fw, y_m, x_nw, y_s), fill=WALL_COLOR)
        if kind.north_west(grid, cell) is None:
            draw.line((x_fw, y_m, x_nw, y_n), fill=WALL_COLOR)
        if grid.north(cell) is None:
            draw.line((x_nw, y_n, x_ne, y_n), fill=WALL_COLOR)
        north_east = kind.north_east(grid, cell)
        if north_east is None or not grid.are_linked(cell, north_east):
            draw.line((x_ne, y_n, x_fe, y_m), fill=WALL_COLOR)
        south_east = kind.south_east(grid, cell)
        if south_east is None or not grid.are_linked(cell, south_east):
            draw.line((x_fe, y_m, x_ne, y_s), fill=WALL_COLOR)
        south = grid.south(cell)
        if south is None or not grid.are_linked(cell, south):
            draw.line((x_ne, y_s, x_nw, y_s), fill=WALL_COLOR)
    return image


# ----------------------------------------------------------------------
# triangle


def _render_triangle(grid: Grid, cell_size: int) -> Image.Image:
    kind: Triangle = grid.kind
    half_width = cell_size / 2.0
    height = cell_size * math.sqrt(3) / 2.0
    half_height = height / 2.0
    image_width = int(cell_size * (kind.cols + 1) / 2.0)
    image_height = int(height * kind.rows)
    image = Image.new("RGB", (image_width + 1, image_height + 1), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)
    distances = grid.distances()
    maximum = distances.max()[1] if distances is not None else None

    def corners(cell: Any) -> Tuple[float, ...]:
        cx = half_width + cell.col * half_width
        cy = half_height + cell.row * height
        if kind.is_upright(cell):
            apex_y, base_y = cy - half_height, cy + half_height
        else:
            apex_y, base_y = cy + half_height, cy - half_height
        return cx - half_width, cx, cx + half_width, apex_y, base_y

    for cell in grid.cells():
        color = background_for(distances, cell, maximum)
        if color is None:
            continue
        west_x, mid_x, east_x, apex_y, base_y = corners(cell)
        draw.polygon([(west_x, base_y), (mid_x, apex_y), (east_x, base_y)], fill=color)

    for cell in grid.cells():
        west_x, mid_x, east_x, apex_y, base_y = corners(cell)
        if grid.west(cell) is None:
            draw.line((west_x, base_y, mid_x, apex_y), fill=WALL_COLOR)
        east = grid.east(cell)
        if east is None or not grid.are_linked(cell, east):
            draw.line((east_x, base_y, mid_x, apex_y), fill=WALL_COLOR)
        upright = kind.is_upright(cell)
        north = grid.north(cell)
        no_south = upright and grid.south(cell) is None
        not_linked = not upright and (north is None or not grid.are_linked(cell, north))
        if no_south or not_linked:
            draw.line((east_x, base_y, west_x, base_y), fill=WALL_COLOR)
    return image


__all__ = ["render_png", "save_png", "background_for"]
