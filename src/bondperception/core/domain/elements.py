#!/usr/bin/env python3
# src/bondperception/core/domain/elements.py

"""
Element symbol to atomic number lookup.
"""

import logging
from typing import Dict, Tuple

logger = logging.getLogger(__name__)

# Index in this tuple is the atomic number; "X" is the sentinel for unknown symbols.
ELEMENTS: Tuple[str, ...] = (
    "X", "H", "He", "Li", "Be", "B", "C", "N", "O", "F", "Ne", "Na", "Mg", "Al",
    "Si", "P", "S", "Cl", "Ar", "K", "Ca", "Sc", "Ti", "V", "Cr", "Mn", "Fe",
    "Co", "Ni", "Cu", "Zn", "Ga", "Ge", "As", "Se", "Br", "Kr", "Rb", "Sr", "Y",
    "Zr", "Nb", "Mo", "Tc", "Ru", "Rh", "Pd", "Ag", "Cd", "In", "Sn", "Sb", "Te",
    "I", "Xe", "Cs", "Ba", "La", "Ce", "Pr", "Nd", "Pm", "Sm", "Eu", "Gd", "Tb",
    "Dy", "Ho", "Er", "Tm", "Yb", "Lu", "Hf", "Ta", "W", "Re", "Os", "Ir", "Pt",
    "Au", "Hg", "Tl", "Pb", "Bi", "Po", "At", "Rn", "Fr", "Ra", "Ac", "Th", "Pa",
    "U", "Np", "Pu", "Am", "Cm", "Bk", "Cf", "Es", "Fm", "Md", "No", "Lr", "Rf",
    "Db", "Sg", "Bh", "Hs", "Mt", "Ds", "Rg", "Cn", "Nh", "Fl", "Mc", "Lv", "Ts",
    "Og",
)

UNKNOWN_ATOMIC_NUMBER = 0

_ATOMIC_NUMBERS: Dict[str, int] = {
    symbol: number for number, symbol in enumerate(ELEMENTS) if number > 0
}


def atomic_number(symbol: str) -> int:
    """Return the atomic number of an element symbol.

    Symbols are matched exactly. Unknown or placeholder symbols map to
    ``UNKNOWN_ATOMIC_NUMBER`` instead of raising, so they sort as the
    lightest element.
    """
    number = _ATOMIC_NUMBERS.get(symbol)
    if number is None:
        logger.debug(f"Unknown element symbol {symbol!r}, using atomic number 0")
        return UNKNOWN_ATOMIC_NUMBER
    return number
