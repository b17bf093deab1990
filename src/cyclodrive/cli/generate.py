"""
Command-line interface for cycloidal disc generation.
"""

import argparse
import logging
import sys
from pathlib import Path

from ..io.loaders import load_design_json
from ..io.package import generate_package, save_package_to_dir
from ..core import calculate_physics_metrics, calculate_min_wall_thickness, generate_profile
from ..calculator.core import calculate_drive_specs
from ..calculator.output import to_json, to_summary
from ..calculator.presets import (
    DEFAULT_PARAMS,
    MANUFACTURING_PRESETS,
    PRESETS,
    apply_manufacturing_preset,
    get_preset,
)
from ..calculator.validation import apply_fix, check_design_quality


def _print_presets():
    print("Design presets:")
    for name, preset in PRESETS.items():
        print(f"  {name:<24} {preset['description']}")
    print("\nManufacturing presets:")
    for name, clearances in MANUFACTURING_PRESETS.items():
        print(
            f"  {name:<32} tolerance {clearances['tolerance']:.3f} mm, "
            f"hole {clearances['hole_tolerance']:.3f} mm"
        )


def _analyze(params):
    metrics = calculate_physics_metrics(params)
    report = check_design_quality(params, metrics)
    specs = calculate_drive_specs(params)
    return metrics, report, specs


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Generate cycloidal disc profiles and drawings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default design (12 pins, 11:1), files written to the current directory
  cyclodrive

  # Load a saved design and write the package elsewhere
  cyclodrive design.json -o out/

  # Start from a preset with clearances for a resin printer
  cyclodrive --preset "Heavy" --manufacturing "Resin"

  # Apply the first suggested fix and print JSON without saving
  cyclodrive design.json --apply-fix 0 --json --no-save

  # Ask the advisory service for an assessment
  cyclodrive design.json --advise

  # Show available presets
  cyclodrive --list-presets
        """
    )

    parser.add_argument(
        'design_file',
        type=str,
        nargs='?',
        default=None,
        help='Design JSON file (default: standard design)'
    )

    parser.add_argument(
        '--preset',
        type=str,
        default=None,
        help='Design preset name or unambiguous prefix (ignored with a design file)'
    )

    parser.add_argument(
        '--manufacturing',
        type=str,
        default=None,
        help='Manufacturing preset name or prefix (sets both clearances)'
    )

    parser.add_argument(
        '--tolerance',
        type=float,
        default=None,
        help='Profile tolerance in mm (overrides the manufacturing preset)'
    )

    parser.add_argument(
        '--apply-fix',
        type=int,
        default=None,
        metavar='N',
        help='Apply suggested fix N (0-based) before generating'
    )

    parser.add_argument(
        '-o', '--output-dir',
        type=str,
        default='.',
        help='Output directory for the package (default: current directory)'
    )

    parser.add_argument(
        '--no-save',
        action='store_true',
        help='Do not write any files'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the design and analysis as JSON instead of a summary'
    )

    parser.add_argument(
        '--advise',
        action='store_true',
        help='Ask the advisory service for an engineering assessment'
    )

    parser.add_argument(
        '--list-presets',
        action='store_true',
        help='List design and manufacturing presets and exit'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_presets:
        _print_presets()
        return 0

    # Progress goes to stderr when stdout carries JSON
    out = sys.stderr if args.json else sys.stdout

    def say(msg: str):
        print(msg, file=out)

    # Select design
    try:
        if args.design_file:
            say(f"Loading design from {args.design_file}...")
            params = load_design_json(args.design_file)
        elif args.preset:
            params = get_preset(args.preset)
        else:
            params = DEFAULT_PARAMS

        if args.manufacturing:
            params = apply_manufacturing_preset(params, args.manufacturing)
        if args.tolerance is not None:
            params = params.model_copy(update={"tolerance": args.tolerance})
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading design: {e}", file=sys.stderr)
        return 1

    metrics, report, specs = _analyze(params)

    if args.apply_fix is not None:
        try:
            params = apply_fix(report, args.apply_fix)
        except IndexError:
            print(
                f"Error: no fix {args.apply_fix} (design has {len(report.fixes)} suggested fixes)",
                file=sys.stderr,
            )
            return 1
        fix = report.fixes[args.apply_fix]
        say(f"Applied fix: {fix.label} ({fix.description})")
        metrics, report, specs = _analyze(params)

    if args.json:
        print(to_json(params, report=report, metrics=metrics, specs=specs))
    else:
        print(to_summary(params, report=report, metrics=metrics, specs=specs))

    if args.advise:
        from ..advisory import AdvisoryClient

        min_wall = calculate_min_wall_thickness(generate_profile(params), params.hole_radius)
        result = AdvisoryClient().analyze_design(params, min_wall)
        say("")
        if result.available:
            say(result.text)
        else:
            say(f"Advisory unavailable: {result.reason}")

    if not args.no_save:
        files = generate_package(params, log=say)
        written = save_package_to_dir(files, Path(args.output_dir))
        say(f"\nSaved {len(written)} files to {args.output_dir}:")
        for path in written:
            say(f"  {path.name}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
