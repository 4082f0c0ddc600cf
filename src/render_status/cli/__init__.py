"""Command-line interface for render-deploy-status."""
