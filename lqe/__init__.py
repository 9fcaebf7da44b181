"""
LQE - Linear Quadratic Estimator.

A scalar recursive Kalman filter: only the previous belief and the
current observation are needed to compute the next belief.

Public API:
- LQE
- filter_sequence
"""

from lqe.filter import LQE, filter_sequence

__version__ = '1.0.0'
