"""
Dashboard summary: totals, balance, a merged expense/income timeline
and per-day income vs expense trend.
"""
from decimal import Decimal
from typing import List

from sqlalchemy.orm import Session

from ..models.expense import Expense
from ..models.income import Income, DEFAULT_INCOME_CATEGORY
from ..models.user import User
from .stats import sum_by_label, total_amount

DEFAULT_RECENT_LIMIT = 5


def timeline_entry(record) -> dict:
    """Common shape for an expense or an income in the merged timeline"""
    if isinstance(record, Expense):
        return {
            "id": record.id,
            "type": "expense",
            "title": record.title,
            "amount": float(record.amount),
            "categoryName": record.category_name,
            "date": record.date.isoformat() if record.date else None,
        }
    return {
        "id": record.id,
        "type": "income",
        "title": record.source,
        "amount": float(record.amount),
        "categoryName": record.category or DEFAULT_INCOME_CATEGORY,
        "date": record.date.isoformat() if record.date else None,
    }


def merge_timeline(expenses, incomes) -> List[dict]:
    """Expenses and incomes in one list, newest first"""
    records = list(expenses) + list(incomes)
    records.sort(key=lambda r: r.date, reverse=True)
    return [timeline_entry(r) for r in records]


def daily_trend(expenses, incomes) -> List[dict]:
    """Income and expense totals per calendar day, oldest day first"""
    days = {}
    for kind, records in (("expense", expenses), ("income", incomes)):
        for record in records:
            day = record.date.date().isoformat()
            bucket = days.setdefault(day, {"income": Decimal(0), "expense": Decimal(0)})
            bucket[kind] += Decimal(str(record.amount))

    return [
        {"date": day, "income": float(totals["income"]), "expense": float(totals["expense"])}
        for day, totals in sorted(days.items())
    ]


def build_dashboard(user: User, db: Session, limit: int = DEFAULT_RECENT_LIMIT) -> dict:
    expenses = db.query(Expense).filter(Expense.user_id == user.id).all()
    incomes = db.query(Income).filter(Income.user_id == user.id).all()

    total_expenses = total_amount(expenses)
    total_income = total_amount(incomes)

    return {
        "totalIncome": total_income,
        "totalExpenses": total_expenses,
        "balance": float(Decimal(str(total_income)) - Decimal(str(total_expenses))),
        "expenseCategoryStats": sum_by_label(expenses, "category_name"),
        "incomeCategoryStats": sum_by_label(incomes, "category"),
        "recentTransactions": merge_timeline(expenses, incomes)[:limit],
        "trend": daily_trend(expenses, incomes),
    }
