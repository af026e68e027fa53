"""Enable or disable an ERC-20 payment method on the PaymentManager."""

import logging

from ..records import checksum
from ..runner import run_script

logger = logging.getLogger(__name__)

DEFAULT_PAYMENT_TOKEN = "0x84547Ab11037f68e696DD0557A152E77Ea30d926"


def add_arguments(parser):
    parser.add_argument("--token", default=DEFAULT_PAYMENT_TOKEN, help="ERC-20 payment token address")
    parser.add_argument("--disable", action="store_true", help="remove the token instead of adding it")


def main(chain, token=DEFAULT_PAYMENT_TOKEN, disable=False):
    payment_manager_address = chain.addresses["payment_manager_proxy"]
    token = checksum(token, "token")
    supported = not disable

    payment_manager = chain.factory("PaymentManager").attach(payment_manager_address)
    chain.transact(
        payment_manager.functions.updateSupportedPaymentMethod(token, supported),
        "updateSupportedPaymentMethod",
    )
    logger.info(f"Payment method {token} {'enabled' if supported else 'disabled'}")


if __name__ == "__main__":
    run_script(main, add_arguments)
