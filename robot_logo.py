"""Robot face logo with an animated antenna.

The logo is drawn onto any object that speaks the surface interface in
``logo_surface``. State is threaded explicitly: ``render_frame`` takes the
current state and returns the next one.
"""

import math
from dataclasses import dataclass, replace

SIZE = 400
FULL_TURN = 360.0

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
ORANGE_RED = (255, 69, 0)

CONTAINER_SIZE = 350
LOGO_WIDTH = 200
LOGO_HEIGHT = 140
LOGO_DROP = 35
EAR_SIZE = 55
EYE_SIZE = 37
EYE_SHIFT = 40
ANTENNA_WEIGHT = 12
ANTENNA_SWAY = 55
TIP_SIZE = 27
MOUTH_WEIGHT = 10
ANTENNA_STEP = 5


@dataclass(frozen=True)
class AnimationState:
    angle: float = 0.0
    step: float = ANTENNA_STEP


@dataclass(frozen=True)
class LogoGeometry:
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class Palette:
    background: tuple
    logo: tuple


@dataclass(frozen=True)
class Pen:
    x: float
    y: float


@dataclass(frozen=True)
class LogoState:
    size: int
    center: tuple
    palette: Palette
    logo: LogoGeometry
    animation: AnimationState


def lerp(a, b, t):
    return a + (b - a) * t


def norm(value, low, high):
    """Map ``value`` from ``[low, high]`` onto ``[0, 1]``."""
    return (value - low) / (high - low)


def initialize(size=SIZE):
    center = (size // 2, size // 2)
    return LogoState(
        size=size,
        center=center,
        palette=Palette(background=ORANGE_RED, logo=WHITE),
        logo=LogoGeometry(
            x=center[0],
            y=center[1] + LOGO_DROP,
            width=LOGO_WIDTH,
            height=LOGO_HEIGHT,
        ),
        animation=AnimationState(),
    )


def line_to(surface, pen, dx, dy):
    """Draw from the pen by a relative offset and return the moved pen."""
    x_to = pen.x + dx
    y_to = pen.y + dy
    surface.line(pen.x, pen.y, x_to, y_to)
    return Pen(x_to, y_to)


def antenna_sway(angle):
    # sin gives -1..1, squeezed into 0..1 then spread over -55..55
    return lerp(-ANTENNA_SWAY, ANTENNA_SWAY, norm(math.sin(math.radians(angle)), -1, 1))


def tip_scale(angle):
    # half angle: one 0 -> 1 -> 0 pulse per full turn of the sway
    return lerp(0.8, 1.2, math.sin(math.radians(angle / 2)))


def advance(animation):
    angle = (animation.angle + animation.step) % FULL_TURN
    return replace(animation, angle=angle)


def ear_offset(logo):
    return int(logo.width / 2.2)


def draw_logo(surface, state):
    """Draw the face, antenna and face internals. Returns the next state."""
    logo = state.logo
    color = state.palette.logo
    background = state.palette.background

    # face outline
    surface.no_stroke()
    surface.fill(color)
    surface.ellipse(logo.x, logo.y, logo.width, logo.height)
    shift = ear_offset(logo)
    surface.ellipse(logo.x - shift, logo.y - 30, EAR_SIZE)
    surface.ellipse(logo.x + shift, logo.y - 30, EAR_SIZE)

    # antenna
    surface.stroke(color)
    surface.stroke_weight(ANTENNA_WEIGHT)
    pen = Pen(logo.x, logo.y - 70)
    pen = line_to(surface, pen, 15, -60)
    pen = line_to(surface, pen, antenna_sway(state.animation.angle), 10)
    tip = TIP_SIZE * tip_scale(state.animation.angle)
    surface.ellipse(pen.x, pen.y, tip, tip)

    # face internals
    surface.no_stroke()
    surface.fill(background)
    surface.ellipse(logo.x - EYE_SHIFT, logo.y - 12, EYE_SIZE)
    surface.ellipse(logo.x + EYE_SHIFT, logo.y - 12, EYE_SIZE)

    surface.stroke(background)
    surface.stroke_weight(MOUTH_WEIGHT)
    surface.no_fill()
    surface.arc(logo.x, logo.y, 120, 85, math.radians(40), math.radians(140))

    return replace(state, animation=advance(state.animation))


def render_frame(surface, state):
    surface.background(BLACK)

    # container
    surface.fill(state.palette.background)
    surface.ellipse(state.center[0], state.center[1], CONTAINER_SIZE)

    return draw_logo(surface, state)
