"""Pydantic models for render-deploy-status."""
