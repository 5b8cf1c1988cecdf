#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exceptions raised by qmf_unitroots.

Only invalid arguments are signalled here. Errors coming from numpy or
statsmodels (singular design matrix, constant series, ...) are passed to the
caller unchanged: on synthetic data they mean the draw itself is degenerate.
"""


class InvalidArgumentError(ValueError):
    """An argument cannot produce a meaningful simulation or test."""
