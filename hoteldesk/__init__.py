"""Hotel Desk — guests, rooms and reservations for a small hotel."""

__version__ = "0.1.0"
