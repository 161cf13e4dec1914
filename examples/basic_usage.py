"""Basic chromahub usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from chromahub import (
    AdobeRGBColor,
    HSLColor,
    Illuminant,
    RGBColor,
    XYZColor,
    color_convert,
    np_convert,
    parse_color,
)


def demonstrate_colors() -> None:
    # Parse CSS text and convert between spaces.
    lavender = parse_color("hsl(245, 50%, 60%)")
    print("HSL -> hex:", lavender.convert(RGBColor).to_hex())

    accent = RGBColor.from_str("rgb(255, 50%, 0.25)")
    print("RGB as 8-bit:", accent.int_value)
    print("RGB -> HSV:", color_convert(accent, "hsv"))
    print("RGB -> Adobe RGB:", accent.convert(AdobeRGBColor))


def demonstrate_hub() -> None:
    # Every conversion passes through XYZ; the illuminant travels with it.
    xyz = XYZColor(HSLColor((120.0, 0.5, 0.5)), Illuminant.D65)
    print("XYZ under D65:", xyz)
    print("Adapted to D50:", xyz.color_adapt(Illuminant.D50))


def demonstrate_arrays() -> None:
    # Whole images convert with the vectorized kernels.
    image = np.random.default_rng(0).random((4, 4, 3))
    hsv = np_convert(image, "rgb", "hsv")
    print("HSV image shape:", hsv.shape)
    print("Round trip error:", np.abs(np_convert(hsv, "hsv", "rgb") - image).max())


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_hub()
    demonstrate_arrays()
