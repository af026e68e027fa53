"""
Royalties Provider
==================

RoyaltiesProvider proxy deployment.
"""
