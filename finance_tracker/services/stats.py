"""
Aggregations over a user's transactions.
Always computed from the rows passed in; nothing is cached between requests.
"""
from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable


def _amount(record) -> Decimal:
    # str() first so float inputs do not drag binary noise into the sum
    return Decimal(str(record.amount))


def total_amount(records: Iterable) -> float:
    return float(sum((_amount(r) for r in records), Decimal(0)))


def sum_by_label(records: Iterable, attribute: str) -> Dict[str, float]:
    """Sum amounts grouped by a string attribute (e.g. category_name)"""
    totals = defaultdict(Decimal)
    for record in records:
        totals[getattr(record, attribute)] += _amount(record)
    return {label: float(amount) for label, amount in totals.items()}


def summarize_expenses(expenses) -> dict:
    """
    Totals for a list of expenses.

    Grouping is by the denormalized category_name, so two categories sharing
    a name end up in the same bucket.
    """
    expenses = list(expenses)
    return {
        "totalAmount": total_amount(expenses) if expenses else 0,
        "categoryStats": sum_by_label(expenses, "category_name"),
        "count": len(expenses),
    }


def summarize_incomes(incomes) -> dict:
    incomes = list(incomes)
    return {
        "totalAmount": total_amount(incomes) if incomes else 0,
        "count": len(incomes),
    }
