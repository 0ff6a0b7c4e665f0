# csv_dashboard/dashboard/__init__.py

from .app import create_dashboard
