#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyMUCAL command-line interface

Commands
--------
1. **calc**  — cross sections of one element at one photon energy
2. **info**  — element constants, edges and lines (energy = 0)
3. **scan**  — absorption coefficient over an energy range
4. **check** — load and validate the dataset file

Usage
-----
::

    # Iron at 10 keV
    pymucal --data-file mcmaster.h5 calc Fe 10000

    # Same element by atomic number, with debug logging
    pymucal -v calc 26 10000

    # Edges and constants of lead
    pymucal info Pb

    # 50 log-spaced points between 1 and 30 keV
    pymucal scan Cu --start 1000 --stop 30000 --num 50 --log

    # Same, with a plot of the cross sections (needs matplotlib)
    pymucal scan Cu --start 1000 --stop 30000 --log --plot cu.png

Exit status is 0 on success (including informational warnings), 1 when
the element or energy is rejected and 2 when the dataset cannot be
loaded.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

import numpy as np

from pymucal.api import mucal
from pymucal.exceptions import PyMucalError
from pymucal.models.dataset import McMasterDataset
from pymucal.models.records import ComputationResult, ErrorKind
from pymucal.readers.hdf5 import load_dataset
from pymucal.utils.constants import EDGE_LABELS, LINE_LABELS, PERIODIC_TABLE

logger = logging.getLogger("pymucal.cli")

DEFAULT_DATA_FILE = "mcmaster.h5"
"""Dataset file used when ``--data-file`` is not given."""


def _split_element(
    token: str,
    z_flag: int | None,
    dataset: McMasterDataset,
) -> tuple[str | None, int | None]:
    """Interpret a positional element argument as a symbol or a Z

    A numeric token that disagrees with ``--z`` is passed on as a symbol
    so the resolver reports the mismatch.
    """
    if not token.isdigit():
        return token, z_flag
    Z = int(token)
    if not z_flag or z_flag == Z:
        return None, Z
    return dataset.symbol_of(Z) or token, z_flag



def _is_failure(err: ErrorKind) -> bool:
    return err is not ErrorKind.NO_ERROR and not err.is_warning


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_calc(args, dataset: McMasterDataset) -> int:
    """Print cross sections at one energy."""
    symbol, z_hint = _split_element(args.element, args.z, dataset)
    result, err = mucal(symbol, z_hint, args.energy, verbose=True, dataset=dataset)
    if _is_failure(err):
        print(f"ERROR: {result.message}")
        return 1
    _print_result(result)
    return 0


def cmd_info(args, dataset: McMasterDataset) -> int:
    """Print the energy-independent constants of an element."""
    symbol, z_hint = _split_element(args.element, args.z, dataset)
    result, _ = mucal(symbol, z_hint, 0.0, verbose=True, dataset=dataset)
    if not result.is_constants_only:
        print(f"ERROR: {result.message}")
        return 1

    record = result.element
    name = PERIODIC_TABLE[result.atomic_number]["name"]
    print(f"  {name} ({result.symbol}), Z={result.atomic_number}")
    print(f"  Atomic weight:     {result.atomic_weight:.4f} g/mol")
    print(f"  Density:           {result.density:.4g} g/cm^3")
    print(f"  Conversion factor: {result.conversion_factor:.4f} barns/atom per cm^2/g")
    print("  Edges (eV):")
    for label, value in zip(EDGE_LABELS, record.edges.as_tuple()):
        print(f"    {label:<3s} {value:12.2f}" if value > 0 else f"    {label:<3s} {'-':>12s}")
    print(
        "  L jump ratios:     "
        + "  ".join(f"{v:.4f}" for v in record.jump_ratios.as_tuple())
    )
    print("  Emission lines (eV):")
    for label, value in zip(LINE_LABELS, record.lines.as_tuple()):
        print(f"    {label:<3s} {value:12.2f}" if value > 0 else f"    {label:<3s} {'-':>12s}")
    print(f"  Fluorescence yield: K={record.k_yield:.4f}  L={record.l_yield:.4f}")
    return 0


def cmd_scan(args, dataset: McMasterDataset) -> int:
    """Print the absorption coefficient over an energy grid."""
    if args.start <= 0 or args.stop <= args.start or args.num < 2:
        print("ERROR: need 0 < --start < --stop and --num >= 2")
        return 1

    symbol, z_hint = _split_element(args.element, args.z, dataset)
    grid = np.geomspace if args.log else np.linspace
    energies = grid(args.start, args.stop, args.num)

    first, err = mucal(symbol, z_hint, float(energies[0]), verbose=True, dataset=dataset)
    if _is_failure(err):
        print(f"ERROR: {first.message}")
        return 1

    results = []
    print(f"# {first.symbol} (Z={first.atomic_number})")
    print(f"# {'energy_eV':>12s} {'shell':>5s} {'total_barns':>14s} {'mu_rho_cm2g':>14s} {'mu_1/cm':>14s}")
    for energy in energies:
        result, _ = mucal(None, first.atomic_number, float(energy), dataset=dataset)
        results.append(result)
        print(
            f"  {energy:12.2f} {result.shell.value:>5s} {result.total:14.6e} "
            f"{result.mass_absorption_coefficient:14.6e} {result.absorption_coefficient:14.6e}"
        )

    if args.plot:
        _plot_scan(results, args.plot)
        print(f"# plot written to {args.plot}")
    return 0


def cmd_check(args, dataset: McMasterDataset) -> int:
    """Report what the dataset file contains."""
    missing = [
        Z for Z in range(1, dataset.zmax + 1)
        if Z not in dataset and Z not in dataset.excluded
    ]
    print(f"  Source:   {dataset.source}")
    print(f"  Records:  {len(dataset)} (Z=1..{dataset.zmax})")
    print(f"  Excluded: {', '.join(dataset.symbol_of(Z) for Z in sorted(dataset.excluded))}")
    if missing:
        print(f"  Missing:  {', '.join(dataset.symbol_of(Z) for Z in missing)}")
    return 0


def _print_result(result: ComputationResult) -> None:
    print(f"  Element:          {result.symbol} (Z={result.atomic_number})")
    print(f"  Atomic weight:    {result.atomic_weight:.4f} g/mol")
    print(f"  Photon energy:    {result.energy_eV:.2f} eV")
    print(f"  Shell:            {result.shell.value}")
    print(f"  Photo-absorption: {result.photo:.6e} barns/atom")
    print(f"  Coherent:         {result.coherent:.6e} barns/atom")
    print(f"  Incoherent:       {result.incoherent:.6e} barns/atom")
    print(f"  Total:            {result.total:.6e} barns/atom")
    print(f"  Mass absorption:  {result.mass_absorption_coefficient:.6e} cm^2/g")
    print(f"  Absorption coef.: {result.absorption_coefficient:.6e} 1/cm")
    if result.message:
        print(f"  WARNING: {result.message}")


def _plot_scan(results: list[ComputationResult], output: str) -> None:
    """Save a log-log plot of the cross sections of a scan."""
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    energies = [r.energy_eV for r in results]
    fig, ax = plt.subplots(figsize=(11, 7))
    for attr, ls in (("photo", "-"), ("coherent", "--"), ("incoherent", ":"), ("total", "-")):
        ax.loglog(energies, [getattr(r, attr) for r in results], label=attr, ls=ls)
    for edge in results[0].element.edges.as_tuple():
        if energies[0] <= edge <= energies[-1]:
            ax.axvline(edge, color="gray", alpha=0.4, lw=0.8)
    ax.set_xlabel("Photon energy (eV)")
    ax.set_ylabel("Cross section (barns/atom)")
    ax.set_title(f"McMaster cross sections: {results[0].symbol} (Z={results[0].atomic_number})")
    ax.legend(loc="upper right")
    ax.grid(True, which="both", alpha=0.3)
    fig.tight_layout()
    fig.savefig(output)
    plt.close(fig)
    logger.debug("Saved scan plot to %s", output)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pymucal",
        description="X-ray cross sections from the McMaster tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
    pymucal calc Fe 10000                          # iron at 10 keV
    pymucal calc 26 10000                          # same, by Z
    pymucal info Pb                                # constants and edges
    pymucal scan Cu --start 1000 --stop 30000 --log
    pymucal --data-file other.h5 check             # validate a data file
""",
    )

    parser.add_argument(
        "--data-file", "-d",
        default=DEFAULT_DATA_FILE,
        help=f"McMaster dataset HDF5 file (default: {DEFAULT_DATA_FILE})",
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip consistency checks when loading the dataset",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command", help="Command to run")

    calc = sub.add_parser("calc", help="Cross sections at one energy")
    calc.add_argument("element", help="Element symbol or atomic number")
    calc.add_argument("energy", type=float, help="Photon energy (eV)")
    calc.add_argument("--z", type=int, default=None, help="Atomic number to cross-check")

    info = sub.add_parser("info", help="Element constants, edges and lines")
    info.add_argument("element", help="Element symbol or atomic number")
    info.add_argument("--z", type=int, default=None, help="Atomic number to cross-check")

    scan = sub.add_parser("scan", help="Absorption coefficient over an energy range")
    scan.add_argument("element", help="Element symbol or atomic number")
    scan.add_argument("--z", type=int, default=None, help="Atomic number to cross-check")
    scan.add_argument("--start", type=float, required=True, help="First energy (eV)")
    scan.add_argument("--stop", type=float, required=True, help="Last energy (eV)")
    scan.add_argument("--num", type=int, default=50, help="Number of points (default: 50)")
    scan.add_argument("--log", action="store_true", help="Logarithmic energy spacing")
    scan.add_argument("--plot", metavar="FILE", default=None, help="Also save a log-log plot (needs matplotlib)")

    sub.add_parser("check", help="Load and validate the dataset file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.ERROR, format="%(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    t0 = time.time()
    try:
        dataset = load_dataset(args.data_file, validate=not args.no_validate)
    except PyMucalError as exc:
        print(f"ERROR: cannot load dataset: {exc}")
        return 2
    logger.debug("Loaded %r in %.3fs", dataset, time.time() - t0)

    commands = {
        "calc": cmd_calc,
        "info": cmd_info,
        "scan": cmd_scan,
        "check": cmd_check,
    }
    return commands[args.command](args, dataset)


if __name__ == "__main__":
    sys.exit(main())
