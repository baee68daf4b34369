"""YAML configuration for the importer CLI."""
