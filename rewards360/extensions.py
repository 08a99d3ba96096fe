"""
Flask extensions initialization.
"""
from flask_sqlalchemy import SQLAlchemy

# Database
db = SQLAlchemy()
