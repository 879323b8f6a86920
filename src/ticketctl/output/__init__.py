"""Output layer — Rich receipts, quiet output, and JSON."""
