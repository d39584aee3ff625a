# (r, g, b) 0-255 -> (h degrees, s, v) standard HSV
samples_rgb_hsv = {
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (128, 128, 128): (0.0, 0.0, 128 / 255),
    (255, 0, 0): (0.0, 1.0, 1.0),
    (0, 255, 0): (120.0, 1.0, 1.0),
    (0, 0, 255): (240.0, 1.0, 1.0),
    (255, 255, 0): (60.0, 1.0, 1.0),
    (0, 255, 255): (180.0, 1.0, 1.0),
    (255, 0, 255): (300.0, 1.0, 1.0),
    (255, 128, 0): (128 / 255 * 60, 1.0, 1.0),
    (102, 51, 153): (270.0, 2 / 3, 0.6),
    (51, 102, 153): (210.0, 2 / 3, 0.6),
}

# standard (h, s, v) -> SE picker (h, s, v)
samples_standard_se = {
    (0.0, 0.0, 0.0): (0.0, -100.0, -100.0),
    (0.0, 1.0, 1.0): (0.0, 100.0, 100.0),
    (120.0, 0.5, 0.5): (120.0, 0.0, 0.0),
    (240.0, 0.25, 0.75): (240.0, -50.0, 50.0),
    (359.0, 0.9, 0.1): (359.0, 80.0, -80.0),
}

# (hex string, (a, r, g, b))
samples_hex_argb = {
    "#FF112233": (255, 0x11, 0x22, 0x33),
    "#00000000": (0, 0, 0, 0),
    "#ffffffff": (255, 255, 255, 255),
    "#80Ab00cD": (0x80, 0xAB, 0x00, 0xCD),
}

# every (r, g, b) on a coarse grid, corners included
rgb_grid = [
    (r, g, b)
    for r in range(0, 256, 17)
    for g in range(0, 256, 17)
    for b in range(0, 256, 17)
]
