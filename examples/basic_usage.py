"""Basic secolor usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from secolor import (
    BlueprintMapping,
    ColorSpace,
    Rgb,
    color_from_hex,
    color_to_hex,
    convert,
    np_convert,
)


def demonstrate_hex() -> None:
    # Decode a picker value and encode it back.
    accent = color_from_hex("#FFFF8040")
    print("Decoded:", accent)
    print("Encoded:", color_to_hex(accent.replace(a=128)))


def demonstrate_hsv() -> None:
    # RGB -> in-game picker values -> blueprint values.
    accent = Rgb(255, 128, 64)
    se = convert(accent, ColorSpace.SE_HSV)
    print("SE picker:", se)
    for mapping in BlueprintMapping:
        print(f"Blueprint ({mapping.value}):",
              convert(se, ColorSpace.BLUEPRINT_HSV, blueprint_mapping=mapping))
    print("Back to RGB:", convert(se, ColorSpace.RGB))


def demonstrate_arrays() -> None:
    palette = np.array([[255, 0, 0], [0, 255, 0], [0, 0, 255], [40, 40, 40]])
    print("Palette as SE HSV:\n", np_convert(palette, "rgb", "se"))


if __name__ == "__main__":
    demonstrate_hex()
    demonstrate_hsv()
    demonstrate_arrays()
