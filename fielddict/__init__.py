"""Field-level data dictionary builder for Salesforce metadata repositories."""

__version__ = "1.0.0"
