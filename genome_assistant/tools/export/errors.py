class ExportError(Exception):
    """Raised when a report or history export cannot be produced."""
