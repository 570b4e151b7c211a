"""Command-line interface adapters.

Provides CLI commands for managing schedules:
- schedule: Create a CronJob for a task definition
- unschedule: Delete a CronJob by schedule name
- list: Show schedules, optionally for one task definition
"""
