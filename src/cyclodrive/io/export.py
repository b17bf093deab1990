"""
Drawing exporters for the cycloidal disc.

- DXF: minimal ASCII interchange document with the toleranced profile as a
  closed polyline and the expanded center bore as a circle
- SVG: standalone drawing of a DiscPath, filled with its fill rule

Both are self-contained text with no external references.
"""

import logging
from pathlib import Path
from typing import Sequence, Union, TYPE_CHECKING

from ..constants import DXF_PRECISION, DXF_PROFILE_LAYER, DXF_HOLE_LAYER
from .loaders import DesignParameters

if TYPE_CHECKING:
    from ..core.profile import ProfilePoint
    from ..core.path import DiscPath

logger = logging.getLogger(__name__)


def _num(value: float) -> str:
    return f"{value:.{DXF_PRECISION}f}"


def to_dxf(points: Sequence["ProfilePoint"], params: DesignParameters) -> str:
    """
    Serialize a disc profile and its center bore as a DXF document.

    The points should already carry the manufacturing tolerance (the output
    of generate_profile() with default tolerance). The bore is expanded by
    params.hole_tolerance.

    Structure:
        SECTION/ENTITIES
        POLYLINE (layer CycloidProfile, closed) VERTEX* SEQEND
        CIRCLE (layer CenterHole, center 0,0,0)
        ENDSEC/EOF

    Args:
        points: Toleranced profile points
        params: Design parameters (hole_radius, hole_tolerance)

    Returns:
        DXF text, one group code or value per line
    """
    zero = _num(0.0)

    dxf = "0\nSECTION\n2\nENTITIES\n"

    # 66=1: vertices follow, 70=1: closed polyline
    dxf += f"0\nPOLYLINE\n8\n{DXF_PROFILE_LAYER}\n66\n1\n70\n1\n"
    for p in points:
        dxf += f"0\nVERTEX\n8\n{DXF_PROFILE_LAYER}\n"
        dxf += f"10\n{_num(p.x)}\n20\n{_num(p.y)}\n30\n{zero}\n"
    dxf += "0\nSEQEND\n"

    effective_hole_radius = params.hole_radius + params.hole_tolerance
    dxf += f"0\nCIRCLE\n8\n{DXF_HOLE_LAYER}\n"
    dxf += f"10\n{zero}\n20\n{zero}\n30\n{zero}\n"
    dxf += f"40\n{_num(effective_hole_radius)}\n"

    dxf += "0\nENDSEC\n0\nEOF\n"
    return dxf


def save_dxf(
    points: Sequence["ProfilePoint"],
    params: DesignParameters,
    filepath: Union[str, Path],
) -> Path:
    """Write the DXF document to a file and return its path."""
    filepath = Path(filepath)
    filepath.write_text(to_dxf(points, params))
    logger.info(f"Exported disc profile ({len(points)} vertices) to {filepath}")
    return filepath


def to_svg_document(
    disc_path: "DiscPath",
    extent_mm: float,
    fill: str = "#3b82f6",
    stroke: str = "#1e293b",
    stroke_width_mm: float = 0.2,
) -> str:
    """
    Wrap a DiscPath in a standalone SVG document.

    The drawing is centered on the disc with a y-up coordinate frame and
    uses the path's own fill rule, so the output-pin holes render as voids.

    Args:
        disc_path: Path from build_disc_path()
        extent_mm: Half-width of the square view box (mm)
        fill: Fill colour
        stroke: Outline colour
        stroke_width_mm: Outline width (mm)

    Returns:
        SVG document text
    """
    size = 2 * extent_mm
    view_box = f"{-extent_mm:g} {-extent_mm:g} {size:g} {size:g}"

    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size:g}mm" height="{size:g}mm" '
        f'viewBox="{view_box}">\n'
        '  <g transform="scale(1,-1)">\n'
        f'    <path d="{disc_path.to_svg()}" fill="{fill}" '
        f'fill-rule="{disc_path.fill_rule.value}" stroke="{stroke}" '
        f'stroke-width="{stroke_width_mm:g}"/>\n'
        '  </g>\n'
        '</svg>\n'
    )
