"""Store Locator Presentation Layer."""
