from .user import User
from .category import Category
from .expense import Expense
from .income import Income

__all__ = [
    "User",
    "Category",
    "Expense",
    "Income"
]
