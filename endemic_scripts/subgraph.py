"""
Clients for the Endemic subgraph (GraphQL) and the Endemic REST API.

Migration data is always fetched live; there is no local cache.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

import requests

from . import config
from .exceptions import SubgraphError
from .records import RoyaltyRecord

logger = logging.getLogger(__name__)

PAGE_SIZE = 1000

AUCTIONS_QUERY = """
query GetAllAuctions($first: Int!, $lastId: ID!) {
  auctions(first: $first, where: { id_gt: $lastId }, orderBy: id, orderDirection: asc) {
    id
  }
}
"""

OFFERS_QUERY = """
query GetAllOffers($first: Int!, $lastId: ID!) {
  offers(first: $first, where: { id_gt: $lastId }, orderBy: id, orderDirection: asc) {
    id
  }
}
"""

ROYALTIES_QUERY = """
query GetAllRoyalties($first: Int!, $lastId: ID!) {
  nftContracts(
    first: $first
    where: { id_gt: $lastId, royalties_not: null, royaltiesRecipient_not: null }
    orderBy: id
    orderDirection: asc
  ) {
    id
    royalties
    royaltiesRecipient
  }
}
"""


class SubgraphClient:
    def __init__(self, url: Optional[str] = None, api_url: Optional[str] = None,
                 session: Optional[requests.Session] = None, timeout: int = 30):
        self.url = url or config.subgraph_url()
        self.api_url = api_url or config.api_url()
        self.session = session or requests.Session()
        self.timeout = timeout

    def query(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        response = self.session.post(
            self.url, json={"query": query, "variables": variables or {}}, timeout=self.timeout
        )
        response.raise_for_status()
        payload = response.json()

        if payload.get("errors"):
            messages = "; ".join(error.get("message", str(error)) for error in payload["errors"])
            raise SubgraphError(f"Subgraph query failed: {messages}")
        if payload.get("data") is None:
            raise SubgraphError("Subgraph response has no data")
        return payload["data"]

    def paginate(self, query: str, entity: str, page_size: int = PAGE_SIZE) -> Iterator[Dict[str, Any]]:
        """Yield every entity of a query, following the `id_gt` cursor."""
        last_id = ""
        while True:
            rows = self.query(query, {"first": page_size, "lastId": last_id}).get(entity)
            if rows is None:
                raise SubgraphError(f"Subgraph response has no '{entity}' field")
            yield from rows
            if len(rows) < page_size:
                return
            last_id = rows[-1]["id"]

    def get_all_auction_ids(self) -> List[str]:
        ids = [auction["id"] for auction in self.paginate(AUCTIONS_QUERY, "auctions")]
        logger.info(f"Fetched {len(ids)} auctions from subgraph")
        return ids

    def get_all_offer_ids(self) -> List[int]:
        ids = [int(offer["id"]) for offer in self.paginate(OFFERS_QUERY, "offers")]
        logger.info(f"Fetched {len(ids)} offers from subgraph")
        return ids

    def get_collections_with_royalties(self) -> List[RoyaltyRecord]:
        collections = [
            RoyaltyRecord.from_dict({
                "nftContract": row["id"],
                "feeRecipient": row["royaltiesRecipient"],
                "fee": row["royalties"],
            })
            for row in self.paginate(ROYALTIES_QUERY, "nftContracts")
        ]
        logger.info(f"Fetched {len(collections)} collections with royalties from subgraph")
        return collections

    def get_verified_users(self) -> List[Dict[str, Any]]:
        response = self.session.get(f"{self.api_url}/users/verified-users", timeout=self.timeout)
        response.raise_for_status()
        users = response.json()
        logger.info(f"Fetched {len(users)} verified users")
        return users
