"""
endemic-scripts <script> [--network NAME] [options]

Dispatches to any script module; `endemic-scripts --list` shows them all.
"""

import importlib
import sys

from .runner import run_script

SCRIPTS = {
    "deploy-and-upgrade-art-order-factory-implementation":
        "art_orders.deploy_and_upgrade_art_order_factory_implementation",
    "deploy-art-order-factory": "art_orders.deploy_art_order_factory",
    "deploy-art-orders-proxy": "art_orders.deploy_art_orders_proxy",
    "upgrade-art-orders-proxy": "art_orders.upgrade_art_orders_proxy",
    "deploy-collection-bid": "bid.deploy_collection_bid",
    "deploy-endemic-erc20-pausable": "erc20.deploy_endemic_erc20_pausable",
    "deploy-endemic-vesting": "erc20.deploy_endemic_vesting",
    "allocate-vesting-tokens": "erc20.allocate_vesting_tokens",
    "deploy-erc721-factory": "erc721.deploy_erc721_factory",
    "deploy-erc721": "erc721.deploy_erc721",
    "deploy-nft-factory": "erc721.deploy_nft_factory",
    "deploy-openspace-factory": "erc721.deploy_openspace_factory",
    "upgrade-erc721-proxy": "erc721.upgrade_erc721_proxy",
    "deploy-endemic-exchange": "exchange.deploy_endemic_exchange",
    "upgrade-endemic-exchange-proxy": "exchange.upgrade_endemic_exchange_proxy",
    "deploy-fee-provider": "fee_provider.deploy_fee_provider",
    "deploy-art-minter": "minter.deploy_art_minter",
    "deploy-payment-manager": "payment_manager.deploy_payment_manager",
    "deploy-royalties-provider": "royalties_provider.deploy_royalties_provider",
    "deploy-tipjar": "tipjar.deploy_tipjar",
    "cancel-auctions": "maintenance.cancel_auctions",
    "cancel-offers": "maintenance.cancel_offers",
    "migrate-roles": "maintenance.migrate_roles",
    "migrate-royalties": "maintenance.migrate_royalties",
    "migrate-failed-royalties": "maintenance.migrate_failed_royalties",
    "update-payment-manager": "maintenance.update_payment_manager",
}


def load_script(name):
    if name not in SCRIPTS:
        raise KeyError(name)
    return importlib.import_module(f"{__package__}.{SCRIPTS[name]}")


def main(argv=None):
    argv = list(sys.argv[1:] if argv is None else argv)

    if not argv or argv[0] in ("-h", "--help", "--list"):
        print(__doc__.strip())
        print()
        for name in sorted(SCRIPTS):
            print(f"  {name}")
        sys.exit(0 if argv else 2)

    name, script_argv = argv[0], argv[1:]
    try:
        module = load_script(name)
    except KeyError:
        print(f"Unknown script '{name}'. Run with --list to see available scripts.", file=sys.stderr)
        sys.exit(2)

    run_script(module.main, getattr(module, "add_arguments", None), script_argv,
               prog=f"endemic-scripts {name}")


if __name__ == "__main__":
    main()
