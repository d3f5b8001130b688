"""Cloud product, region and pricing information: data model, store interface, scraping and platform helpers."""

__version__ = "0.1.0"