"""
Bids
====

CollectionBid proxy deployment.
"""
