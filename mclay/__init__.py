"""Polynomials over prime fields, matrices, monomial ideals, ring maps and Koszul matrices."""

__version__ = "0.1.0"