"""Square colors cycle by index; all keep at least 3:1 contrast on white."""

SQUARE_COLORS = [
    "#D32F2F",  # red
    "#1565C0",  # blue
    "#2E7D32",  # green
    "#6A1B9A",  # purple
    "#E65100",  # orange
    "#00695C",  # teal
    "#C2185B",  # pink
    "#4E342E",  # brown
]
SPIRAL_COLOR = "#BF360C"
LABEL_COLOR = "#000000"
BACKGROUND_COLOR = "#FFFFFF"

SQUARE_STROKE_WIDTH = 2.0
SPIRAL_STROKE_WIDTH = 3.0


def square_color(index: int) -> str:
    return SQUARE_COLORS[index % len(SQUARE_COLORS)]
