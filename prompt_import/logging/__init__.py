"""Console logging and JSON Lines error log for the importer CLI."""
