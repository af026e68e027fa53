"""
Minter
======

ArtMinter proxy deployment.
"""
