"""
Core business logic for the birthday reminder service.
Used by the web API, the scheduler and the operator scripts.
"""

# Database (SQLAlchemy)
from .database import get_connection, get_transaction, get_engine, close_engine

# Recurrence
from .recurrence import (
    next_occurrence, days_until, current_age, age_at_next_occurrence, occurrence_in_year
)

# Domain types
from .birthdays import Birthday
