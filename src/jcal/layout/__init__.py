"""Month/year grids, week numbering and plain-text rendering."""
