"""
DSFM App - Market Structure Analysis Core

Turns per-instrument return series into a correlation matrix, a thresholded
correlation network with centrality metrics, and a shock-propagation
simulation over that network.
"""

__version__ = "0.1.0"
__author__ = "DSFM Team"
