"""
Exchange
========

EndemicExchange proxy deployment and upgrades.
"""
