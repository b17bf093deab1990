"""
Shared export and packaging logic for cycloidal disc designs.

Produces one output package per design: disc.dxf, disc.svg, design.json
and design.md. The CLI writes the package to a directory.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from ..constants import SVG_MARGIN_MM
from .loaders import DesignParameters

logger = logging.getLogger(__name__)


@dataclass
class PackageFiles:
    """Container for all output files of one design."""

    disc_dxf: Optional[str] = None
    disc_svg: Optional[str] = None
    design_json: Optional[str] = None
    design_md: Optional[str] = None


def generate_package(
    params: DesignParameters,
    include_svg: bool = True,
    log: Optional[Callable[[str], None]] = None,
) -> PackageFiles:
    """Generate all output files for a cycloidal drive design.

    Args:
        params: Complete design parameters.
        include_svg: Render the disc drawing (default True).
        log: Optional progress callback (e.g. print).

    Returns:
        PackageFiles with all generated file data.
    """
    # Lazy imports to avoid circular dependency (io -> core/calculator -> io)
    from ..core import build_disc_path, calculate_physics_metrics, generate_profile
    from ..calculator.core import calculate_drive_specs
    from ..calculator.output import to_json, to_markdown
    from ..calculator.validation import check_design_quality
    from .export import to_dxf, to_svg_document

    files = PackageFiles()

    def _log(msg: str):
        if log:
            log(msg)

    _log("Generating disc profile...")
    points = generate_profile(params)
    if not points:
        logger.warning("Profile is empty; DXF and SVG will contain no outline")
    _log(f"  {len(points)} profile points")

    files.disc_dxf = to_dxf(points, params)

    if include_svg:
        _log("Rendering disc SVG...")
        extent = params.pin_circle_radius + params.pin_radius + params.eccentricity + SVG_MARGIN_MM
        files.disc_svg = to_svg_document(build_disc_path(points, params), extent)

    _log("Analyzing design...")
    metrics = calculate_physics_metrics(params)
    report = check_design_quality(params, metrics)
    specs = calculate_drive_specs(params)

    _log("Generating design.json and design.md...")
    files.design_json = to_json(params, report=report, metrics=metrics, specs=specs)
    files.design_md = to_markdown(params, report=report, metrics=metrics, specs=specs)

    return files


def save_package_to_dir(files: PackageFiles, output_dir: Path) -> List[Path]:
    """Write all PackageFiles to a directory with standard naming.

    Args:
        files: PackageFiles from generate_package().
        output_dir: Directory to write files into (created if needed).

    Returns:
        List of Paths written.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []

    file_map = {
        "disc.dxf": files.disc_dxf,
        "disc.svg": files.disc_svg,
        "design.json": files.design_json,
        "design.md": files.design_md,
    }

    for name, data in file_map.items():
        if data is not None:
            path = output_dir / name
            path.write_text(data, encoding="utf-8")
            written.append(path)

    logger.info(f"Wrote {len(written)} files to {output_dir}")
    return written
