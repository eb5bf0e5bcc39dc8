"""
Core domain models, contracts, and configuration.

This module contains the foundational building blocks describing the
simulation domain, independent of the solvers and grids that consume it.
"""
