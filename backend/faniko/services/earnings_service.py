# backend/faniko/services/earnings_service.py

from typing import Any, Dict, Iterable

from faniko.db import get_db
from faniko.models.payments import Transaction
from faniko.services.creator_service import get_creator
from faniko.utils.helpers import same_name

# transaction type -> totals key
SOURCES = {
    "tip": "tips",
    "ppv_unlock": "ppv",
    "subscription": "subscriptions",
}


def _money(value: float):
    """Round float noise away; whole amounts come back as int."""
    value = round(value, 2)
    return int(value) if float(value).is_integer() else value


def summarize(transactions: Iterable[Transaction]) -> Dict[str, Any]:
    totals = {key: 0.0 for key in SOURCES.values()}
    for txn in transactions:
        key = SOURCES.get(txn.type)
        if key is not None:
            totals[key] += txn.amount or 0

    all_time = sum(totals.values())
    result = {key: _money(value) for key, value in totals.items()}
    result["allTime"] = _money(all_time)
    return result


def earnings(username: str) -> Dict[str, Any]:
    """
    Lifetime totals per source plus the raw ledger.
    Transactions for deleted posts still count.
    """
    creator = get_creator(username)
    db = get_db()

    creator_txns = [
        t for t in db.transactions if same_name(t.creator_username, creator.username)
    ]

    return {
        "creator": creator.username,
        "totals": summarize(creator_txns),
        "transactions": [t.to_json() for t in creator_txns],
    }
