"""
FlowLayout - Geometry for left-to-right flowing rows.

Children are placed leading-aligned, one after another, separated by the
horizontal gap (also applied at the leading edge). A child that would
cross the available width starts a new row; rows are separated by the
vertical gap (also applied at the top). Within a row, children with a
baseline share it; children without one are centred in the row.

Pure geometry: no tkinter dependency, sizes in pixels.
"""
from typing import List, Optional, Sequence, Tuple

Size = Tuple[int, int]
Position = Tuple[int, int]

DEFAULT_VERTICAL_GAP = 8


def layout(
    sizes: Sequence[Size],
    baselines: Sequence[Optional[int]],
    width: int,
    hgap: int,
    vgap: int = DEFAULT_VERTICAL_GAP
) -> Tuple[List[Position], Size]:
    """
    Compute child positions for a flow layout.

    Args:
        sizes: (width, height) of each child, in child order
        baselines: Baseline offset from each child's top, None if it has none
        width: Available container width; <= 0 lays everything on one row
        hgap: Horizontal gap between children
        vgap: Vertical gap between rows

    Returns:
        ((x, y) for each child, (required_width, required_height))
    """
    if len(sizes) != len(baselines):
        raise ValueError(
            f"sizes and baselines differ in length: {len(sizes)} != {len(baselines)}"
        )

    positions: List[Position] = [(0, 0)] * len(sizes)
    rows = _break_rows(sizes, width, hgap)

    y = vgap
    required_width = 0
    for row in rows:
        row_height = _place_row(row, sizes, baselines, hgap, y, positions)
        last = row[-1]
        required_width = max(required_width, positions[last][0] + sizes[last][0] + hgap)
        y += row_height + vgap

    if not rows:
        return positions, (hgap * 2, vgap * 2)
    return positions, (required_width, y)


def preferred_size(sizes: Sequence[Size], baselines: Sequence[Optional[int]],
                   hgap: int, vgap: int = DEFAULT_VERTICAL_GAP) -> Size:
    """Returns:
        Size needed to lay out all children on a single row
    """
    _, size = layout(sizes, baselines, 0, hgap, vgap)
    return size


def _break_rows(sizes: Sequence[Size], width: int, hgap: int) -> List[List[int]]:
    """Split child indices into rows that fit within width."""
    rows: List[List[int]] = []
    current: List[int] = []
    x = hgap

    for index, (child_width, _) in enumerate(sizes):
        # First child of a row is always placed, even if too wide
        if current and width > 0 and x + child_width + hgap > width:
            rows.append(current)
            current = []
            x = hgap
        current.append(index)
        x += child_width + hgap

    if current:
        rows.append(current)
    return rows


def _place_row(
    row: List[int],
    sizes: Sequence[Size],
    baselines: Sequence[Optional[int]],
    hgap: int,
    top: int,
    positions: List[Position]
) -> int:
    """
    Position one row of children in place.

    Returns:
        Height of the row
    """
    max_ascent = 0
    max_descent = 0
    plain_height = 0
    for index in row:
        height = sizes[index][1]
        baseline = baselines[index]
        if baseline is None:
            plain_height = max(plain_height, height)
        else:
            max_ascent = max(max_ascent, baseline)
            max_descent = max(max_descent, height - baseline)

    band = max_ascent + max_descent
    row_height = max(band, plain_height)
    band_top = top + (row_height - band) // 2

    x = hgap
    for index in row:
        child_width, height = sizes[index]
        baseline = baselines[index]
        if baseline is None:
            y = top + (row_height - height) // 2
        else:
            y = band_top + max_ascent - baseline
        positions[index] = (x, y)
        x += child_width + hgap

    return row_height
