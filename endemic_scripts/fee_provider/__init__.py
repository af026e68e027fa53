"""
Fee Provider
============

FeeProvider proxy deployment.
"""
