"""Store Locator - proximity search and marker state engine."""
