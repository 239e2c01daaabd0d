"""WSGI entry point, e.g. ``gunicorn tasktracker.wsgi``."""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'tasktracker.settings')

application = get_wsgi_application()
