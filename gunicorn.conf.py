"""
Gunicorn settings for the analytics API.

Set FLASK_ENV=production so run.py builds the app with ProductionConfig.
"""
import os

bind = f"0.0.0.0:{os.getenv('PORT', '8080')}"
workers = int(os.getenv('GUNICORN_WORKERS', '2'))

# Report generation is a handful of queries plus one insert
timeout = 30

accesslog = '-'
errorlog = '-'
loglevel = os.getenv('LOG_LEVEL', 'info').lower()
