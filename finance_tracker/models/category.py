from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base, utcnow

DEFAULT_ICON = "circle"
DEFAULT_COLOR = "#000000"

KIND_DEFAULT = "default"
KIND_CUSTOM = "custom"

# Seeded for every new user at registration
DEFAULT_CATEGORIES = [
    {"name": "Food", "icon": "fast-food", "color": "#FF6384"},
    {"name": "Transport", "icon": "car", "color": "#36A2EB"},
    {"name": "Housing", "icon": "home", "color": "#FFCE56"},
    {"name": "Utilities", "icon": "flash", "color": "#4BC0C0"},
    {"name": "Entertainment", "icon": "game-controller", "color": "#9966FF"},
    {"name": "Health", "icon": "medkit", "color": "#FF9F40"},
]

class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    name = Column(String, nullable=False)
    icon = Column(String, default=DEFAULT_ICON)  # icon identifier for the UI
    color = Column(String, default=DEFAULT_COLOR)  # hex color for UI
    kind = Column(String, default=KIND_CUSTOM, nullable=False)  # 'default' or 'custom'
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    user = relationship("User", back_populates="categories")
