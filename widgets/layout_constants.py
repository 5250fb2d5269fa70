MARGIN = 5

# The scrollable document in the demo: a checkerboard of cells
CELL_SIZE = 100
CELLS_WIDE = 30
CELLS_HIGH = 60

INPUT_HEIGHT = 32

# Seconds between applying two queued scroll targets
QUEUE_TICK = 0.6


LIGHT_YELLOW = (1, 1, 0.97, 1)  # Ad Hoc Light Yellow
DARK_GREY = (0.5, 0.5, 0.5, 1)  # ad hoc; fine-tune please

FONT_SIZE = 14
