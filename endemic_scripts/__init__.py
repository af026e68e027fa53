"""
Endemic Contract Scripts
========================

Scripts for deploying, upgrading and administering the Endemic contracts.

Structure:
- art_orders/: ArtOrder escrow and OrderCollectionFactory
- bid/: CollectionBid proxy
- erc20/: END token and vesting
- erc721/: NFT collections and factories
- exchange/: EndemicExchange proxy
- fee_provider/, royalties_provider/, payment_manager/: marketplace settings
- minter/, tipjar/: standalone contracts
- maintenance/: administrative migrations (auctions, offers, roles, royalties)
"""

__version__ = "1.0.0"
__author__ = "Endemic Team"
