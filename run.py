"""
Development entry point for the Rewards360 analytics API.

    python run.py                      # FLASK_ENV defaults to development
    gunicorn -c gunicorn.conf.py run:app
"""
import os

from rewards360 import create_app

app = create_app(os.getenv('FLASK_ENV', 'development'))

if __name__ == '__main__':
    app.run(port=int(os.getenv('PORT', 5000)), debug=app.config.get('DEBUG', False))
