"""ticketctl — checkout receipts with age and birthday discounts."""

__version__ = "0.1.0"
