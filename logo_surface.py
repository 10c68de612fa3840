"""Drawing surfaces the logo renders onto.

A surface keeps sketch-style pen state (fill, stroke, stroke weight) and
exposes centered shape commands. Coordinates are canvas units with y
pointing down; arc angles are radians, clockwise from the positive x axis.
"""

import logging
import math
from dataclasses import dataclass, field

from PIL import Image, ImageDraw

_logger = logging.getLogger(__name__)

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


class PillowSurface:
    """Rasterize commands into a square RGB Pillow image.

    ``scale`` supersamples the canvas; ``image()`` downsamples back to
    ``size`` pixels so edges come out smooth.
    """

    def __init__(self, size, scale=1):
        if int(size) <= 0:
            raise ValueError(f"size must be positive, got {size!r}")
        if int(scale) < 1:
            raise ValueError(f"scale must be at least 1, got {scale!r}")
        self.size = int(size)
        self.scale = int(scale)
        pixels = self.size * self.scale
        self._img = Image.new("RGB", (pixels, pixels), BLACK)
        self._draw = ImageDraw.Draw(self._img)
        self._fill = WHITE
        self._stroke = BLACK
        self._weight = 1.0
        _logger.debug("surface %dx%d (scale %d)", self.size, self.size, self.scale)

    # pen state

    def fill(self, color):
        self._fill = tuple(color)

    def no_fill(self):
        self._fill = None

    def stroke(self, color):
        self._stroke = tuple(color)

    def no_stroke(self):
        self._stroke = None

    def stroke_weight(self, weight):
        self._weight = float(weight)

    # shapes

    def background(self, color):
        pixels = self.size * self.scale
        self._draw.rectangle([0, 0, pixels, pixels], fill=tuple(color))

    def ellipse(self, x, y, w, h=None):
        if h is None:
            h = w
        if self._fill is None and self._stroke is None:
            return
        if self._stroke is None:
            self._draw.ellipse(self._box(x, y, w, h), fill=self._fill)
            return
        # strokes straddle the outline, so grow the box by half the weight
        self._draw.ellipse(
            self._box(x, y, w, h, grow=self._weight / 2),
            fill=self._fill,
            outline=self._stroke,
            width=self._pixel_weight(),
        )

    def line(self, x1, y1, x2, y2):
        if self._stroke is None:
            return
        s = self.scale
        self._draw.line(
            [(x1 * s, y1 * s), (x2 * s, y2 * s)],
            fill=self._stroke,
            width=self._pixel_weight(),
        )
        if self._weight > 1:
            # round caps
            for cx, cy in ((x1, y1), (x2, y2)):
                self._draw.ellipse(
                    self._box(cx, cy, self._weight, self._weight),
                    fill=self._stroke,
                )

    def arc(self, x, y, w, h, start, stop):
        start_deg = math.degrees(start)
        stop_deg = math.degrees(stop)
        if self._fill is not None:
            self._draw.pieslice(self._box(x, y, w, h), start_deg, stop_deg, fill=self._fill)
        if self._stroke is not None:
            self._draw.arc(
                self._box(x, y, w, h, grow=self._weight / 2),
                start_deg,
                stop_deg,
                fill=self._stroke,
                width=self._pixel_weight(),
            )

    def image(self):
        if self.scale == 1:
            return self._img.copy()
        return self._img.resize((self.size, self.size), Image.Resampling.LANCZOS)

    def _pixel_weight(self):
        return max(1, round(self._weight * self.scale))

    def _box(self, x, y, w, h, grow=0.0):
        s = self.scale
        half_w = w / 2 + grow
        half_h = h / 2 + grow
        return [(x - half_w) * s, (y - half_h) * s, (x + half_w) * s, (y + half_h) * s]


@dataclass
class RecordingSurface:
    """Surface that records every command as ``(name, args)``."""

    calls: list = field(default_factory=list)

    def _record(self, name, *args):
        self.calls.append((name, args))

    def background(self, color):
        self._record("background", color)

    def fill(self, color):
        self._record("fill", color)

    def no_fill(self):
        self._record("no_fill")

    def stroke(self, color):
        self._record("stroke", color)

    def no_stroke(self):
        self._record("no_stroke")

    def stroke_weight(self, weight):
        self._record("stroke_weight", weight)

    def ellipse(self, x, y, w, h=None):
        self._record("ellipse", x, y, w, w if h is None else h)

    def line(self, x1, y1, x2, y2):
        self._record("line", x1, y1, x2, y2)

    def arc(self, x, y, w, h, start, stop):
        self._record("arc", x, y, w, h, start, stop)

    def named(self, name):
        return [args for call, args in self.calls if call == name]
