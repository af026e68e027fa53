"""
Tipjar
======

Tipjar deployment.
"""
