"""
ERC-721 Collections
===================

EndemicERC721 collections, the collection factories and EndemicNFT upgrades.
"""
