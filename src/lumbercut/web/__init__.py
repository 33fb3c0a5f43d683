"""FastAPI REST API for cutting plans.

This module provides a REST API for computing cutting plans and validating
configurations.

Usage:
    uvicorn lumbercut.web:app --reload
"""

from lumbercut.web.app import app, create_app

__all__ = ["app", "create_app"]
