"""Re-apply royalties for the collections whose original migration failed."""

from ..records import load_failed_royalties
from ..runner import run_script
from .migrate_royalties import apply_royalties


def add_arguments(parser):
    parser.add_argument("--records", dest="records_path", default=None,
                        help="JSON list of {nftContract, feeRecipient, fee}; defaults to the bundled list")


def main(chain, records_path=None):
    return apply_royalties(chain, load_failed_royalties(records_path))


if __name__ == "__main__":
    run_script(main, add_arguments)
