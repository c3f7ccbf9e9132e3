# articlehub/extensions.py
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

# Single, shared instances used across the app
db = SQLAlchemy()
cors = CORS()
