"""
WSGI config for Gestor de Safras project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'gestorsafras.settings')

application = get_wsgi_application()
