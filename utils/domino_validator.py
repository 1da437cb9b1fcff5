#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#----------------------------------------------------------------------------
# Author       : HUYNH Vinh-Nam
# Email        : huynh-vinh.nam@usth.edu.vn
# Created Date : 05-October-2026
# Description  :
"""
    Normalize a raw domino set into a list of (a, b) integer tuples and
    reject anything that is not a pair of integer pips.
"""
#----------------------------------------------------------------------------
import numbers

import numpy as np


class InvalidDominoError(ValueError):
    pass


def to_pip(value, index):
    # bool is an Integral too, but (True, 1) is not a domino
    if isinstance(value, (bool, np.bool_)):
        raise InvalidDominoError(f"Domino #{index}: pip {value!r} is not an integer")

    if isinstance(value, (numbers.Integral, np.integer)):
        return int(value)

    raise InvalidDominoError(f"Domino #{index}: pip {value!r} is not an integer")


def to_domino(domino, index):
    if isinstance(domino, (str, bytes, dict)):
        raise InvalidDominoError(f"Domino #{index}: {domino!r} is not a pair of pips")

    try:
        pips = list(domino)
    except TypeError:
        raise InvalidDominoError(f"Domino #{index}: {domino!r} is not a pair of pips") from None

    if len(pips) != 2:
        raise InvalidDominoError(f"Domino #{index}: expected 2 pips, got {len(pips)} in {domino!r}")

    return (to_pip(pips[0], index), to_pip(pips[1], index))


def validate_dominoes(dominoes):
    """
        Return the domino set as a fresh list of (a, b) int tuples.

        Any finite iterable is accepted (list, tuple, generator, numpy array
        of shape (n, 2)). Multiplicity and order are preserved.
    """
    if isinstance(dominoes, (str, bytes)):
        raise InvalidDominoError(f"{dominoes!r} is not a collection of dominoes")

    try:
        raw = list(dominoes)
    except TypeError:
        raise InvalidDominoError(f"{dominoes!r} is not a collection of dominoes") from None

    return [to_domino(domino, index) for index, domino in enumerate(raw)]
