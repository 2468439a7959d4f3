# viz/renderer_colors.py
from core.interfaces import Cell

BG = (15, 15, 15)
FOOD = (220, 70, 70)
BODY = (40, 160, 70)
GRID = (35, 35, 35)
HUD_BG = (25, 25, 25)
TEXT = (230, 230, 230)

CELL_COLORS = {
    Cell.EMPTY: BG,
    Cell.FOOD: FOOD,
    Cell.SNAKE: BODY,
}
