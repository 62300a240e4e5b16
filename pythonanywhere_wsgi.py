import sys
import os

# Add your project directory to the sys.path
project_home = '/home/YOUR_USERNAME/foodcost'
if project_home not in sys.path:
    sys.path.insert(0, project_home)

# Set the working directory
os.chdir(project_home)

# Production settings unless overridden
os.environ.setdefault('FLASK_ENV', 'production')

# Import your Flask app and make sure the tables exist
from app import app as application, init_db
init_db()
