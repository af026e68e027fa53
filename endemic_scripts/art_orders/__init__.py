"""
Art Orders
==========

ArtOrder escrow proxy and the OrderCollectionFactory behind it.
"""
