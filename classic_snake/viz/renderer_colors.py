# classic_snake/viz/renderer_colors.py
from classic_snake.core import projection as kinds

HEAD = (0x01, 0x57, 0x9B)
BODY = (0x4F, 0xC3, 0xF7)
BG = (0xB2, 0xEB, 0xF2)
GAME_OVER = (0xD2, 0x4D, 0x57)
FOOD = (0xFF, 0x57, 0x22)

TEXT = (0x26, 0x32, 0x38)
PANEL = (0xEC, 0xEF, 0xF1)
BUTTON = (0x90, 0xA4, 0xAE)
BUTTON_TEXT = (0xFF, 0xFF, 0xFF)

BY_KIND = {
    kinds.EMPTY: BG,
    kinds.BODY: BODY,
    kinds.HEAD: HEAD,
    kinds.FRUIT: FOOD,
    kinds.GAME_OVER: GAME_OVER,
}
