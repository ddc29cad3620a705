"""
Core math primitives and calculator models.

This module contains the decimal arithmetic building blocks and the
chained calculator types built on top of them.
"""
