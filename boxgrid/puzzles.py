from __future__ import annotations

from typing import Dict, List, Tuple

from .models import GridSize

EASY_9X9: List[int] = [
    0, 2, 0, 1, 7, 8, 0, 3, 0,
    0, 4, 0, 3, 0, 2, 0, 9, 0,
    1, 0, 0, 0, 0, 0, 0, 0, 6,
    0, 0, 8, 6, 0, 3, 5, 0, 0,
    3, 0, 0, 0, 0, 0, 0, 0, 4,
    0, 0, 6, 7, 0, 9, 2, 0, 0,
    9, 0, 0, 0, 0, 0, 0, 0, 2,
    0, 8, 0, 9, 0, 1, 0, 6, 0,
    0, 1, 0, 4, 3, 6, 0, 5, 0,
]

MEDIUM_9X9: List[int] = [
    5, 3, 0, 0, 7, 0, 0, 0, 0,
    6, 0, 0, 1, 9, 5, 0, 0, 0,
    0, 9, 8, 0, 0, 0, 0, 6, 0,
    8, 0, 0, 0, 6, 0, 0, 0, 3,
    4, 0, 0, 8, 0, 3, 0, 0, 1,
    7, 0, 0, 0, 2, 0, 0, 0, 6,
    0, 6, 0, 0, 0, 0, 2, 8, 0,
    0, 0, 0, 4, 1, 9, 0, 0, 5,
    0, 0, 0, 0, 8, 0, 0, 7, 9,
]

HARD_9X9: List[int] = [
    0, 0, 0, 2, 0, 6, 0, 0, 3,
    0, 6, 0, 0, 8, 0, 0, 0, 0,
    0, 7, 1, 0, 0, 3, 0, 0, 0,
    0, 0, 6, 0, 0, 0, 9, 1, 0,
    0, 0, 7, 8, 0, 9, 6, 0, 0,
    0, 2, 4, 0, 0, 0, 8, 0, 0,
    0, 0, 0, 1, 0, 0, 5, 4, 0,
    0, 0, 0, 0, 3, 0, 0, 8, 0,
    2, 0, 0, 6, 0, 8, 0, 0, 0,
]

EMPTY_9X9: List[int] = [0] * 81

SMALL_4X4: List[int] = [
    1, 0, 0, 4,
    0, 4, 1, 0,
    0, 3, 4, 0,
    4, 0, 0, 3,
]

# boxes 3 wide, 2 tall
SMALL_6X6: List[int] = [
    1, 0, 3, 0, 5, 0,
    0, 5, 0, 1, 0, 3,
    2, 0, 4, 0, 6, 0,
    0, 6, 0, 2, 0, 4,
    3, 0, 5, 0, 1, 0,
    0, 1, 0, 3, 0, 5,
]

PRESETS: Dict[str, Tuple[GridSize, List[int]]] = {
    "Easy (9x9)": (GridSize.DEFAULT, EASY_9X9),
    "Medium (9x9)": (GridSize.DEFAULT, MEDIUM_9X9),
    "Hard (9x9)": (GridSize.DEFAULT, HARD_9X9),
    "Empty (9x9)": (GridSize.DEFAULT, EMPTY_9X9),
    "Small (4x4)": (GridSize(2, 2), SMALL_4X4),
    "Small (6x6)": (GridSize(3, 2), SMALL_6X6),
}


def preset(name: str) -> Tuple[GridSize, List[int]]:
    grid_size, values = PRESETS[name]
    return grid_size, list(values)
