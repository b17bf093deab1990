"""
Vector path assembly for the disc outline and output-pin holes.

The disc and its holes are emitted as a single path. The holes are not
subtracted geometrically: each is drawn as two half-circle arcs and the
path is filled with the even-odd rule, so a renderer that honors
``DiscPath.fill_rule`` shows them as voids.
"""

from dataclasses import dataclass, field
from math import cos, sin, pi
from typing import List, Sequence, Tuple

from ..enums import FillRule
from ..io.loaders import DesignParameters
from .profile import ProfilePoint


@dataclass(frozen=True)
class PathCommand:
    """One SVG-style path command.

    ``op`` is "M", "L", "A" or "Z". For "A" the args are
    (rx, ry, x_axis_rotation, large_arc, sweep, x, y).
    """
    op: str
    args: Tuple[float, ...] = ()


@dataclass
class DiscPath:
    """Closed disc outline plus hole cutouts.

    Attributes:
        commands: Path commands in drawing order
        fill_rule: Fill rule the renderer must use (always even-odd here)
        hole_radius_mm: Radius of each output-pin hole
        hole_centers: Centers of the output-pin holes
    """
    commands: List[PathCommand] = field(default_factory=list)
    fill_rule: FillRule = FillRule.EVEN_ODD
    hole_radius_mm: float = 0.0
    hole_centers: List[Tuple[float, float]] = field(default_factory=list)

    def to_svg(self, precision: int = 4) -> str:
        """Render the commands as an SVG path ``d`` attribute."""
        parts = []
        for cmd in self.commands:
            if cmd.op == "A":
                rx, ry, rot, large, sweep, x, y = cmd.args
                parts.append(
                    f"A {_fmt(rx, precision)} {_fmt(ry, precision)} {_fmt(rot, precision)} "
                    f"{int(large)} {int(sweep)} {_fmt(x, precision)} {_fmt(y, precision)}"
                )
            elif cmd.args:
                coords = " ".join(_fmt(v, precision) for v in cmd.args)
                parts.append(f"{cmd.op} {coords}")
            else:
                parts.append(cmd.op)
        return " ".join(parts)


def _fmt(value: float, precision: int) -> str:
    """Fixed precision with trailing zeros stripped ("12.5", "-3", "0")."""
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def output_hole_radius(params: DesignParameters) -> float:
    """
    Radius of the disc holes the output pins run in.

    The holes must clear the pin's orbit relative to the disc, not just the
    pin itself: hole = output pin radius + eccentricity + hole tolerance.
    """
    return params.output_pin_radius + params.eccentricity + params.hole_tolerance


def build_disc_path(points: Sequence[ProfilePoint], params: DesignParameters) -> DiscPath:
    """
    Build the even-odd disc path with output-pin hole cutouts.

    Args:
        points: Profile points, usually from generate_profile()
        params: Design parameters (output stage fields are used)

    Returns:
        DiscPath ready for rendering
    """
    disc_path = DiscPath(hole_radius_mm=output_hole_radius(params))
    commands = disc_path.commands

    if points:
        first = points[0]
        commands.append(PathCommand("M", (first.x, first.y)))
        for p in points[1:]:
            commands.append(PathCommand("L", (p.x, p.y)))
        commands.append(PathCommand("Z"))

    h = disc_path.hole_radius_mm
    num_holes = params.output_pin_count
    hole_dist = params.output_pin_circle_radius

    for i in range(num_holes):
        angle = (i / num_holes) * 2 * pi
        cx = hole_dist * cos(angle)
        cy = hole_dist * sin(angle)
        disc_path.hole_centers.append((cx, cy))

        # Two half circles drawn against the outline's winding
        commands.append(PathCommand("M", (cx + h, cy)))
        commands.append(PathCommand("A", (h, h, 0.0, 1, 0, cx - h, cy)))
        commands.append(PathCommand("A", (h, h, 0.0, 1, 0, cx + h, cy)))

    return disc_path
