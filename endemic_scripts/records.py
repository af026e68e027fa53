"""
Migration record types and loaders for the static record lists in data/.

Every loader validates the whole list before returning, so a malformed entry
stops a script before any transaction is sent.
"""

import json
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext
from typing import List, Optional

from web3 import Web3

from .exceptions import InvalidRecordError

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')

# RoyaltiesProvider is initialized with this fee limit, in basis points
ROYALTY_FEE_LIMIT = 5000

MAX_UINT256 = 2 ** 256 - 1


def checksum(value, field: str) -> str:
    if not isinstance(value, str) or not Web3.is_address(value):
        raise InvalidRecordError(f"{field} is not a valid address: {value!r}")
    return Web3.to_checksum_address(value)


def _non_negative_int(value, field: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise InvalidRecordError(f"{field} is not an integer: {value!r}")
    if number < 0 or str(number) != str(value).strip():
        raise InvalidRecordError(f"{field} must be a non-negative integer: {value!r}")
    return number


@dataclass(frozen=True)
class RoyaltyRecord:
    """Royalty settings for one NFT collection; fee is in basis points"""
    nft_contract: str
    fee_recipient: str
    fee: int

    @classmethod
    def from_dict(cls, data: dict) -> "RoyaltyRecord":
        fee = _non_negative_int(data.get("fee"), "fee")
        if fee > ROYALTY_FEE_LIMIT:
            raise InvalidRecordError(f"fee {fee} exceeds the {ROYALTY_FEE_LIMIT} basis point royalty limit")
        return cls(
            nft_contract=checksum(data.get("nftContract"), "nftContract"),
            fee_recipient=checksum(data.get("feeRecipient"), "feeRecipient"),
            fee=fee,
        )


@dataclass(frozen=True)
class TokenAllocation:
    """A whole-token transfer to one recipient"""
    recipient: str
    amount: str

    @classmethod
    def from_dict(cls, data: dict) -> "TokenAllocation":
        amount = str(data.get("amount", ""))
        _token_amount_to_wei(amount)
        return cls(recipient=checksum(data.get("recipient"), "recipient"), amount=amount)

    @property
    def amount_wei(self) -> int:
        return _token_amount_to_wei(self.amount)


def _token_amount_to_wei(amount: str) -> int:
    """Whole-token amount to wei; must be positive, exact to 18 decimals and fit in a uint256"""
    try:
        value = Decimal(amount)
    except InvalidOperation:
        raise InvalidRecordError(f"amount is not a number: {amount!r}")
    if not value.is_finite():
        raise InvalidRecordError(f"amount is not a finite number: {amount!r}")
    if value <= 0:
        raise InvalidRecordError(f"amount must be positive: {amount!r}")

    with localcontext() as ctx:
        ctx.prec = 999
        wei = value.scaleb(18)
        if wei != wei.to_integral_value():
            raise InvalidRecordError(f"amount has more than 18 decimal places: {amount!r}")
        if wei > MAX_UINT256:
            raise InvalidRecordError(f"amount does not fit in a uint256: {amount!r}")
    return Web3.to_wei(value, "ether")


@dataclass(frozen=True)
class VestingAllocation:
    """Tokens allocated to one claimer under an allocation type"""
    claimer: str
    alloc_type: int
    initial_allocation: int
    total_allocated: int

    @classmethod
    def from_dict(cls, data: dict) -> "VestingAllocation":
        record = cls(
            claimer=checksum(data.get("claimerAddress"), "claimerAddress"),
            alloc_type=_non_negative_int(data.get("allocType"), "allocType"),
            initial_allocation=_non_negative_int(data.get("initialAllocation"), "initialAllocation"),
            total_allocated=_non_negative_int(data.get("totalAllocated"), "totalAllocated"),
        )
        if record.initial_allocation > record.total_allocated:
            raise InvalidRecordError(f"initialAllocation exceeds totalAllocated for {record.claimer}")
        return record

    def as_tuple(self):
        # matches the contract's AllocationRequest struct order
        return (self.claimer, self.alloc_type, self.initial_allocation, self.total_allocated)


@dataclass(frozen=True)
class VestingAllocationType:
    """Release schedule of an allocation type: cliff end and linear vesting end"""
    alloc_type: int
    end_cliff: int
    end_vesting: int
    max_allocation: int

    @classmethod
    def from_dict(cls, data: dict) -> "VestingAllocationType":
        record = cls(
            alloc_type=_non_negative_int(data.get("allocType"), "allocType"),
            end_cliff=_non_negative_int(data.get("endCliff"), "endCliff"),
            end_vesting=_non_negative_int(data.get("endVesting"), "endVesting"),
            max_allocation=_non_negative_int(data.get("maxAllocation"), "maxAllocation"),
        )
        if record.end_vesting < record.end_cliff:
            raise InvalidRecordError(f"endVesting precedes endCliff for allocation type {record.alloc_type}")
        return record

    def as_tuple(self):
        return (self.alloc_type, self.end_cliff, self.end_vesting, self.max_allocation)


def _load(record_type, filename: str, path: Optional[str] = None) -> list:
    path = path or os.path.join(DATA_DIR, filename)
    with open(path, 'r') as f:
        entries = json.load(f)
    if not isinstance(entries, list):
        raise InvalidRecordError(f"{path} must contain a JSON list")

    records = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise InvalidRecordError(f"{path}[{index}] is not an object")
        try:
            records.append(record_type.from_dict(entry))
        except InvalidRecordError as e:
            raise InvalidRecordError(f"{path}[{index}]: {e}") from e
    return records


def load_failed_royalties(path: Optional[str] = None) -> List[RoyaltyRecord]:
    return _load(RoyaltyRecord, "failed_royalties.json", path)


def load_token_allocations(path: Optional[str] = None) -> List[TokenAllocation]:
    return _load(TokenAllocation, "end_token_allocations.json", path)


def load_vesting_allocations(path: str) -> List[VestingAllocation]:
    records = _load(VestingAllocation, "", path)
    # the vesting contract keeps one allocation per (claimer, allocation type)
    seen = set()
    for record in records:
        key = (record.claimer, record.alloc_type)
        if key in seen:
            raise InvalidRecordError(
                f"{record.claimer} is allocated more than once for allocation type {record.alloc_type}"
            )
        seen.add(key)
    return records


def load_vesting_allocation_types(path: str) -> List[VestingAllocationType]:
    records = _load(VestingAllocationType, "", path)
    if not records:
        raise InvalidRecordError(f"{path} holds no allocation types")
    seen = set()
    for record in records:
        if record.alloc_type in seen:
            raise InvalidRecordError(f"allocation type {record.alloc_type} is defined more than once")
        seen.add(record.alloc_type)
    return records
