import os

from waitress import serve
from employee_manager.app import create_app
from employee_manager.init_db import init_db

app = create_app()

# Initialize and seed the database
init_db(app)

serve(app, host="0.0.0.0", port=int(os.environ.get("PORT", 3000)))
