"""Command-line interface for webdriver-logic."""
