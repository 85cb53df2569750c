# ABOUTME: Export package for writing stored records to files.
# ABOUTME: Provides CSVExporter for the contact message inbox.

from portfolio_showcase.export.csv_exporter import CSVExporter

__all__ = ["CSVExporter"]
