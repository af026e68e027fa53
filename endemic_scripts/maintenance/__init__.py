"""
Maintenance
===========

Administrative migrations against live contracts: canceling auctions and
offers, granting minter roles, back-filling royalties and payment methods.
"""
