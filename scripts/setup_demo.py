#!/usr/bin/env python3
"""
Setup demo data for Finance Tracker

Usage:
    python scripts/setup_demo.py [--email demo@example.com] [--password Demo_Pass1]
"""

import argparse
import sys
from pathlib import Path
from datetime import timedelta

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from finance_tracker.database import SessionLocal, create_tables, utcnow
from finance_tracker.exceptions import FinanceTrackerError
from finance_tracker.models import Category, User
from finance_tracker.schemas import ExpenseCreate, IncomeCreate
from finance_tracker.services import auth as auth_service
from finance_tracker.services import expenses as expense_service
from finance_tracker.services import incomes as income_service

SAMPLE_EXPENSES = [
    {"title": "Groceries", "amount": 45.67, "category": "Food", "days_ago": 1},
    {"title": "Bus pass", "amount": 23.00, "category": "Transport", "days_ago": 2},
    {"title": "Rent", "amount": 850.00, "category": "Housing", "days_ago": 3},
    {"title": "Electricity bill", "amount": 61.20, "category": "Utilities", "days_ago": 4},
    {"title": "Cinema", "amount": 12.50, "category": "Entertainment", "days_ago": 5},
    {"title": "Pharmacy", "amount": 8.99, "category": "Health", "days_ago": 6},
    {"title": "Lunch", "amount": 14.30, "category": "Food", "days_ago": 6},
]

SAMPLE_INCOMES = [
    {"source": "Salary", "amount": 2400.00, "category": "Income", "days_ago": 3},
    {"source": "Freelancing", "amount": 350.00, "category": "Side Job", "days_ago": 5},
]


def create_demo_data(email: str, password: str):
    """Create a demo account with a week of expenses and incomes"""

    # Create database tables
    create_tables()

    db = SessionLocal()
    try:
        user = db.query(User).filter(User.email == email).first()
        if user:
            print(f"Demo user {email} already exists, nothing to do")
            return

        user = auth_service.register_user("Demo User", email, password, db)
        categories = {
            c.name: c.id for c in db.query(Category).filter(Category.user_id == user.id).all()
        }

        now = utcnow()
        for data in SAMPLE_EXPENSES:
            expense_service.create_expense(user, ExpenseCreate(
                title=data["title"],
                amount=data["amount"],
                category=categories[data["category"]],
                date=now - timedelta(days=data["days_ago"])
            ), db)

        for data in SAMPLE_INCOMES:
            income_service.create_income(user, IncomeCreate(
                source=data["source"],
                amount=data["amount"],
                category=data["category"],
                date=now - timedelta(days=data["days_ago"])
            ), db)

        print("✅ Demo data created successfully!")
        print(f"👤 Login with {email} / {password}")
        print(f"📊 Created {len(categories)} default categories")
        print(f"💳 Created {len(SAMPLE_EXPENSES)} expenses and {len(SAMPLE_INCOMES)} incomes")

    except FinanceTrackerError as e:
        print(f"❌ Error creating demo data: {e.message}")
        db.rollback()
    finally:
        db.close()


def main():
    parser = argparse.ArgumentParser(description="Create a demo account with sample transactions.")
    parser.add_argument("--email", default="demo@example.com", help="Demo account email")
    parser.add_argument("--password", default="Demo_Pass1", help="Demo account password")
    args = parser.parse_args()
    create_demo_data(args.email, args.password)


if __name__ == "__main__":
    main()
