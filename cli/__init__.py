"""
CLI package exports.
"""

from .rank_lots import load_lots_csv

__all__ = ["load_lots_csv"]
