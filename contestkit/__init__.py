"""Competitive-programming algorithms and data structures: number theory, numerics, strings, trees and graphs."""

__version__ = "0.1.0"