"""Deployed contract addresses, per network."""

from web3 import Web3

from .exceptions import InvalidRecordError, MissingAddressError, UnknownNetworkError

GOERLI = {
    "royalties_provider_proxy": "0xD0E7364473F0843461F2631306AE248539Dab487",
    "endemic_erc721_factory": "0xB4550D625035B1D563B6c883B34AE83E0fa71411",
    "endemic_erc721": "0x8d32913032259E1A5fC26A6Da6bAF74ED942391c",
    "endemic_exchange_proxy": "0x53431AB725Edf32deF31992c4fd8ba2719c16661",
    "contract_importer": "0x846Ea711c6809cA9Dbf232d95075bd9222C6bdE6",
    "payment_manager_proxy": "0xb5Dd2930Eb6c2106C55126050829D7390d714FEe",
    "endemic_erc1155_proxy": "",
    "endemic_erc1155_beacon": "",
    "endemic_erc1155_factory": "",
    "endemic_end_token": "0x27f31c8B3D6024C44155De1198dB86F23124b1A4",
}

ARBITRUM_SEPOLIA = {
    "endemic_erc721_factory": "0xC33a562169bC0fB03aBDDD869F2952A608eaf641",
    "endemic_erc721": "0x76D3755015cFE958e3351fFe59B9D353b783fa0a",
    "endemic_exchange_proxy": "0x60f42637C941C0B01b3e42dca175A0f5bc4FAB81",
    "payment_manager_proxy": "0xE022E818a4273A8FD6C05833E6fD42DD2Cc59399",
    # implementation: 0x8E22f0ac4E3097c6778BF7976856669e072111e8
    "art_orders": "0x74eD3A709e970de96C6273c9b1034BCA8d66A404",
    # implementation: 0xF13743eC697dccfAa849C5574215035027687066
    "art_order_factory": "0x38fa0567899eEC25b064d089e777bAEcbde1C3A9",
    "art_order_collection": "0xB79852ff8d4c0f37a2926B3cA5A290551E6183e2",
}

AURORA = {
    "royalties_provider_proxy": "0x4282CAB4548FBB27f1eaBD1b16F5B8c3D128B268",
    "endemic_erc721_factory": "0x76FA7f90D3900eB95Cfc58AB12c916984AeC50c8",
    "endemic_erc721": "0x56BD4958781792ace55169a9FbBB6FC7Ce4eF43a",
    "endemic_exchange_proxy": "0x0c45c5971f751D93F2e4Ae0E7CeB149967b846d2",
    "payment_manager_proxy": "0x50929DA8eDEf4077eFBBddDe6B47D5e7A0442063",
    "endemic_end_token": "0x7916afb40e8d776e9002477d4bad56767711b8e7",
}

MAINNET = {
    "royalties_provider_proxy": "0x99F8D550094076b63bbBe84D291Bb8a6D34133aB",
    "endemic_erc721_factory": "0x6574671af0fAAD94714aD2e99e4eC7d50F22EFF6",
    "endemic_erc721": "0x727a68e8DE25C75942E1E033b799E493E362802D",
    "endemic_exchange_proxy": "0xF3891616B1bC96d52f642F2cc8FEB15C6D2a43Da",
    "payment_manager_proxy": "0xD48CC91057118e15fB9841c2138E2ec836AbF438",
    "endemic_end_token": "0x7f5C4AdeD107F66687E6E55dEe36A3A8FA3de030",
}

SEPOLIA = {
    # implementation: 0xC35b86C9828F08d7F7DE3e959BCB0877A33c810c
    "endemic_erc721_factory": "0x892E710aa42ba1a63F500C9b4a85b7D9c646CB6f",
    "endemic_erc721": "0xa4383Eb3f2Ca59FA51871A19CF3D753235f9041D",
    # implementation: 0x5749624215bCab94b1D09d5fdc81B8Ba2a33AA20
    "payment_manager_proxy": "0xe5C828a0AB005E1f2403600C070357c413D313Ba",
    # implementation: 0x1514B11348ADA62B45fb4ec235E9980662a9Ef21
    "endemic_exchange_proxy": "0x00BfA98843a6d855d44Bff622C3cFA130F720CaD",
    # implementation: 0x2F6FB5e4a88CDCFB2F0dDa89FB58671812ca2754
    "art_orders": "0x51f37aCE1c7a05B4c2a90a23E05058E1a6202D7C",
    # implementation: 0x5B073C9A381146593f943b6E821F5eE220847783
    "art_order_factory": "0x8E3C22767df3164cD80b1802b717f1f41193f6aE",
    "art_order_collection": "0xC1E23C1b1744eD7f1d6EA8b374CC0085938106cC",
}

MUMBAI = {
    "royalties_provider_proxy": "0x1F709030A998b1756Ab9917E0Ca0E60F29736f94",
    "endemic_erc721_factory": "0x2255D0C57eF61Eb4f89aC4f8b541c352dFFfc240",
    "endemic_erc721": "0x6d76e19174CB4dEBa01D82BcA16914935c83f792",
    "payment_manager_proxy": "0x2bA3BC56f48f2E28F672B86bA75cB6C379293Fe1",
    "endemic_exchange_proxy": "0x12394c8C432E14c9D2E25967e1B2125Ba58B8A76",
}

POLYGON = {
    "royalties_provider_proxy": "0xaBF9Bd38B968e6ABba30736bb7Ca93270fC023A0",
    "endemic_erc721_factory": "0x01F7F54678CabC43275271EDbF3b354aCb69E7f7",
    "endemic_erc721": "0x6d76e19174CB4dEBa01D82BcA16914935c83f792",
    "endemic_exchange_proxy": "0x5a98342C0E883B9387D070d5f13cFb572D33a936",
    "payment_manager_proxy": "0x0372523354E4aBA4840d2856F77E543384b359bD",
}

NETWORKS = {
    "localhost": {},
    "aurora": AURORA,
    "mainnet": MAINNET,
    "goerli": GOERLI,
    "arbitrum_goerli": {},
    "arbitrum_sepolia": ARBITRUM_SEPOLIA,
    "sepolia": SEPOLIA,
    "mumbai": MUMBAI,
    "polygon": POLYGON,
}


class AddressBook:
    """Read-only view over one network's address table.

    Lookups return checksummed addresses and fail loudly on names that are
    absent, empty or malformed.
    """

    def __init__(self, network, addresses):
        self.network = network
        self._addresses = dict(addresses)

    def __getitem__(self, name):
        value = self._addresses.get(name)
        if not value:
            raise MissingAddressError(self.network, name)
        if not Web3.is_address(value):
            raise InvalidRecordError(f"'{name}' on {self.network} is not a valid address: {value}")
        return Web3.to_checksum_address(value)

    def __contains__(self, name):
        return bool(self._addresses.get(name))

    def get(self, name, default=None):
        if name not in self:
            return default
        return self[name]

    def names(self):
        return sorted(name for name in self._addresses if self._addresses[name])


def get_for_network(network: str) -> AddressBook:
    if network not in NETWORKS:
        raise UnknownNetworkError(network)
    return AddressBook(network, NETWORKS[network])
