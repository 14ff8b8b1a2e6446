#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Cross-section calculation core

* :class:`~pymucal.core.resolver.ElementResolver` — symbol / Z → atomic number
* :func:`~pymucal.core.fit.evaluate_fit` — McMaster log-polynomial kernel
* :class:`~pymucal.core.engine.CrossSectionEngine` — shell selection,
  jump-ratio correction and combination of the cross sections
"""

from __future__ import annotations

from pymucal.core.engine import CrossSectionEngine
from pymucal.core.fit import evaluate_fit
from pymucal.core.resolver import ElementResolver

__all__ = ["CrossSectionEngine", "ElementResolver", "evaluate_fit"]
