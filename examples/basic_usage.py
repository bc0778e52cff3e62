"""Basic gradientgrid usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from gradientgrid import (
    ColorRGB,
    Gradient,
    GradientDirection,
    GradientFill,
    Rect,
)

RESET = "\033[0m"


def paint(mapping, max_row: int, max_col: int) -> None:
    # Two spaces per cell keeps the blocks roughly square in a terminal.
    for row in range(max_row + 1):
        line = "".join(
            f"\033[48;2;{c.r};{c.g};{c.b}m  " for c in (mapping[(col, row)] for col in range(max_col + 1))
        )
        print(line + RESET)


def demonstrate_sampling() -> None:
    gradient = Gradient(
        stops=[ColorRGB.from_hex("#FF0000"), ColorRGB.from_hex("#0000FF")],
        steps=[4],
    )
    print("Spectrum:", [c.to_hex() for c in gradient.spectrum])
    print("Color at 0.5:", gradient.color_at_fraction(0.5))
    print("Color at NaN:", gradient.color_at_fraction(float("nan")))


def demonstrate_directions() -> None:
    gradient = Gradient(
        stops=[(255, 0, 0), (255, 255, 0), (0, 255, 0), (0, 0, 255)],
        steps=[10, 10, 10, 10],
        loop=True,
    )
    for direction in GradientDirection:
        print(f"\n{direction.value}:")
        paint(gradient.build_coordinate_map(8, 24, direction), 8, 24)


def demonstrate_fill() -> None:
    gradient = Gradient(stops=[(20, 20, 60), (240, 160, 40)], steps=[16])
    fill = GradientFill(Rect(4, 2, 12, 4), gradient, GradientDirection.DIAGONAL)
    print("\nfill:")
    for row in range(2, 6):
        cells = (fill.get_color((col, row)) for col in range(4, 16))
        print("".join(f"\033[48;2;{c.r};{c.g};{c.b}m  " for c in cells) + RESET)


if __name__ == "__main__":
    demonstrate_sampling()
    demonstrate_directions()
    demonstrate_fill()
