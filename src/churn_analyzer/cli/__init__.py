"""Command-line interface for the churn analyzer."""
