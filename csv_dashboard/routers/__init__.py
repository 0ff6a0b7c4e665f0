# csv_dashboard/routers/__init__.py

from .csv_files import router as csv_files_router
from .visuals import router as visuals_router
