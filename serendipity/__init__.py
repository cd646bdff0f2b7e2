"""Point-of-sale, inventory, reports and record-file storage for a small bookshop."""

__version__ = "0.1.0"