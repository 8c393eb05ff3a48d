"""WSGI entrypoint for Gunicorn.

Usage:
  gunicorn -w 2 -b 0.0.0.0:8070 wsgi:app
"""

from housie import create_app

app = create_app()
