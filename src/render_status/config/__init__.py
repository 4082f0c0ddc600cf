"""Configuration loading and validation for render-deploy-status.

Main components:
- load_action_config: Build ActionConfig from action inputs
- load_event: Read the triggering workflow event
- Default values for every optional input
"""
