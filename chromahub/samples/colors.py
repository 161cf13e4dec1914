import numpy as np

# RED
RED_FLOAT_RGB = np.array([1.0, 0.0, 0.0], dtype=np.float64)
RED_INT_RGB = np.array([255, 0, 0], dtype=np.uint8)
RED_FLOAT_HSL = np.array([0.0, 1.0, 0.5], dtype=np.float64)

# GREEN
GREEN_FLOAT_RGB = np.array([0.0, 1.0, 0.0], dtype=np.float64)
GREEN_INT_RGB = np.array([0, 255, 0], dtype=np.uint8)
GREEN_FLOAT_HSL = np.array([120.0, 1.0, 0.5], dtype=np.float64)

# BLUE
BLUE_FLOAT_RGB = np.array([0.0, 0.0, 1.0], dtype=np.float64)
BLUE_INT_RGB = np.array([0, 0, 255], dtype=np.uint8)
BLUE_FLOAT_HSL = np.array([240.0, 1.0, 0.5], dtype=np.float64)

# LAVENDER (hsl(245, 50%, 60%), renders as #6E66CC)
LAVENDER_FLOAT_HSL = np.array([245.0, 0.5, 0.6], dtype=np.float64)
LAVENDER_INT_RGB = np.array([110, 102, 204], dtype=np.uint8)
LAVENDER_HEX = "#6E66CC"

# (r, g, b) -> (h, s, l)
samples_rgb_hsl = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 0.5),
    (0.0, 1.0, 0.0): (120.0, 1.0, 0.5),
    (0.0, 0.0, 1.0): (240.0, 1.0, 0.5),
    (1.0, 1.0, 0.0): (60.0, 1.0, 0.5),
    (0.0, 1.0, 1.0): (180.0, 1.0, 0.5),
    (1.0, 0.0, 1.0): (300.0, 1.0, 0.5),
    (0.75, 0.5, 0.25): (30.0, 0.5, 0.5),
    (0.5, 0.25, 0.75): (270.0, 0.5, 0.5),
    (0.2, 0.4, 0.6): (210.0, 0.5, 0.4),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

# (r, g, b) -> (h, s, v)
samples_rgb_hsv = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (0.0, 1.0, 0.0): (120.0, 1.0, 1.0),
    (0.0, 0.0, 1.0): (240.0, 1.0, 1.0),
    (1.0, 1.0, 0.0): (60.0, 1.0, 1.0),
    (0.0, 1.0, 1.0): (180.0, 1.0, 1.0),
    (1.0, 0.0, 1.0): (300.0, 1.0, 1.0),
    (0.75, 0.5, 0.25): (30.0, 2 / 3, 0.75),
    (0.5, 0.25, 0.75): (270.0, 2 / 3, 0.75),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

samples_hsl_rgb = {hsl: rgb for rgb, hsl in samples_rgb_hsl.items()}
samples_hsv_rgb = {hsv: rgb for rgb, hsv in samples_rgb_hsv.items()}

# hue boundaries the sector selection must get right
BOUNDARY_HUES = (0.0, 60.0, 120.0, 180.0, 240.0, 300.0, np.nextafter(360.0, 0.0))
