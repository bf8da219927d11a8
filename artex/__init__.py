"""Article extraction, translation and export tools."""
