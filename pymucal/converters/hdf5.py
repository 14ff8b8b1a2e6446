#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
HDF5 writer for McMaster datasets

Writes deterministic, self-documenting HDF5 files from a
:class:`~pymucal.models.dataset.McMasterDataset`.  The layout is the one
read back by :class:`~pymucal.readers.hdf5.HDF5Reader`; see that module
for the full tree.

Physical units are stored as HDF5 dataset attributes
(``ds.attrs["units"] = "eV"``) and the order of multi-valued arrays as a
``labels`` attribute.  Element-level scalars (Z, symbol, weight, …) are
attributes of the ``Z_{ZZZ}`` group.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import numpy as np

try:
    import h5py
except ImportError as _exc:  # pragma: no cover
    raise ImportError(
        "The 'h5py' package is required by the HDF5 converter.  "
        "Install it with: pip install h5py"
    ) from _exc

from pymucal.exceptions import ConversionError
from pymucal.models.dataset import McMasterDataset
from pymucal.models.records import ElementRecord
from pymucal.utils.constants import (
    EDGE_LABELS,
    FIT_LABELS,
    JUMP_LABELS,
    LINE_LABELS,
    SCATTERING_LABELS,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal writers
# ---------------------------------------------------------------------------

def _write_metadata(h5f: h5py.File, dataset: McMasterDataset) -> None:
    """Write the ``/metadata`` group."""
    meta = h5f.create_group("metadata")
    meta.create_dataset("zmax", data=np.int64(dataset.zmax))
    meta.create_dataset("excluded", data=np.array(sorted(dataset.excluded), dtype="i8"))
    meta.create_dataset("source", data=dataset.source)


def _create_array(
    group: h5py.Group,
    name: str,
    data: Sequence[float],
    *,
    units: str | None = None,
    labels: Sequence[str] | None = None,
) -> h5py.Dataset:
    """Create a float64 dataset with optional ``units`` / ``labels`` attributes

    Parameters
    ----------
    group : h5py.Group
        Parent group.
    name : str
        Dataset name (may contain ``/`` to create intermediate groups).
    data : Sequence[float]
        Values to store.
    units : str | None, optional
        Physical unit string.
    labels : Sequence[str] | None, optional
        Names of the entries, in order.

    Returns
    -------
    h5py.Dataset
        The created dataset.
    """
    ds = group.create_dataset(name, data=np.asarray(data, dtype="f8"))
    if units is not None:
        ds.attrs["units"] = units
    if labels is not None:
        ds.attrs["labels"] = ",".join(labels)
    return ds


def _write_element(parent: h5py.Group, record: ElementRecord) -> None:
    """Write one ``Z_{ZZZ}`` group."""
    grp = parent.create_group(f"Z_{record.Z:03d}")
    grp.attrs["Z"] = np.int64(record.Z)
    grp.attrs["symbol"] = record.symbol
    grp.attrs["atomic_weight"] = np.float64(record.atomic_weight)
    grp.attrs["density"] = np.float64(record.density)
    grp.attrs["conversion_factor"] = np.float64(record.conversion_factor)
    grp.attrs["k_yield"] = np.float64(record.k_yield)
    grp.attrs["l_yield"] = np.float64(record.l_yield)

    _create_array(grp, "edges", record.edges.as_tuple(), units="eV", labels=EDGE_LABELS)
    _create_array(grp, "jump_ratios", record.jump_ratios.as_tuple(), labels=JUMP_LABELS)
    _create_array(
        grp, "emission_lines", record.lines.as_tuple(), units="eV", labels=LINE_LABELS,
    )

    fits = record.fits
    for label, coeffs in zip(FIT_LABELS, (fits.k, fits.l, fits.m, fits.n)):
        if coeffs:
            _create_array(grp, f"fits/{label}", coeffs)
    scattering = record.scattering
    for label, coeffs in zip(
        SCATTERING_LABELS, (scattering.coherent, scattering.incoherent),
    ):
        if coeffs:
            _create_array(grp, f"scattering/{label}", coeffs)

    logger.debug("Wrote element Z=%d (%s)", record.Z, record.symbol)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def write_dataset_hdf5(
    dataset: McMasterDataset,
    output_path: Path | str,
    *,
    overwrite: bool = False,
) -> Path:
    """Write a McMaster dataset to an HDF5 file

    Parameters
    ----------
    dataset : McMasterDataset
        Dataset to persist.
    output_path : Path | str
        Path for the output HDF5 file.  Parent directories are created
        automatically.
    overwrite : bool, optional
        If ``True``, overwrite an existing file.  If ``False`` (default),
        raise :class:`~pymucal.exceptions.ConversionError` when the
        output file already exists.

    Returns
    -------
    Path
        The written file.

    Raises
    ------
    ConversionError
        If *overwrite* is ``False`` and *output_path* exists, or if any
        HDF5 write operation fails.

    Examples
    --------
    >>> write_dataset_hdf5(dataset, "data/mcmaster.h5", overwrite=True)
    PosixPath('data/mcmaster.h5')
    """
    out = Path(output_path)
    if out.exists() and not overwrite:
        raise ConversionError(
            f"Output file {out} already exists and overwrite=False."
        )

    out.parent.mkdir(parents=True, exist_ok=True)
    try:
        mode = "w" if overwrite else "w-"
        with h5py.File(str(out), mode) as h5f:
            _write_metadata(h5f, dataset)
            elements = h5f.create_group("elements")
            for record in dataset:
                _write_element(elements, record)
    except Exception as exc:
        if isinstance(exc, ConversionError):
            raise
        raise ConversionError(
            f"Failed to write HDF5 file {out}: {exc}"
        ) from exc

    logger.info("Wrote %d element records to %s", len(dataset), out)
    return out
