"""
itemstats.core
==============

Typed names and estimator base classes shared across the package.
"""
