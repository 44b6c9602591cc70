"""Demo data for hexuser.

Seeds the users table with a known row for local development and
manual testing. Not needed in production deployments.

Usage:
    hexuser db seed
    # or
    python -m hexuser_demo.seed
"""

__version__ = "0.1.0"
