"""
END Token
=========

Pausable END token distribution and EndemicVesting deployment and allocations.
"""
