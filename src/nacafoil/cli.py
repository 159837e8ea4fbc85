"""
Interactive/CLI geometry plotter for NACA 4- and 5-digit airfoils.

Reads a designation (argument or prompt), computes the section geometry
and shows the chord line, upper/lower surfaces and camber line.
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from nacafoil.geometry import gen_airfoil
from nacafoil.section import section_area

PROMPT = "Enter the desired NACA Airfoil Number - "


def _prompt(value: str | None, text: str, read: Callable[[str], str] | None = None) -> str:
    """
    Prompt for a designation if not provided. Re-prompt until the input
    is a positive integer; format errors are left to the caller.
    """
    if value is not None:
        return value
    if read is None:
        read = input
    while True:
        raw = read(f"{text}\n").strip()
        if raw.isdecimal() and int(raw) > 0:
            return raw
        print(f"Invalid input {raw!r}: enter a positive integer.", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Plot NACA 4/5-digit airfoil geometry.")
    parser.add_argument("designation", nargs="?", help="NACA designation (e.g., 2412, 0012, 23012)")
    parser.add_argument("--chord", type=float, default=1.0, help="Chord length")
    parser.add_argument("--no-show", action="store_true", help="Compute only; skip the plot window")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        designation = _prompt(args.designation, PROMPT)
    except EOFError:
        print("No designation given.", file=sys.stderr)
        return 1

    print(f"Generating NACA {designation} geometry...")
    try:
        geometry = gen_airfoil(designation, chord=args.chord)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    series = geometry.series
    print(f"  Series: {series.digits}-digit (m={series.m:g}, p={series.p:g}, t={series.t:g})")
    print(f"  Grid points: {geometry.x.shape[0]}")
    try:
        area = f"{section_area(geometry.surfaces.boundary):.6f}"
    except ValueError as e:
        # zero-thickness sections
        area = f"n/a ({e})"
    print(f"  Section area: {area}")

    if not args.no_show:
        from nacafoil.plotting import plot_geometry

        plot_geometry(geometry, show=True)

    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
