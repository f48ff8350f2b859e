"""
WSGI entry point

    gunicorn wsgi:app
"""

import os

from app import create_app

# Create app instance for gunicorn
app = create_app()

if __name__ == '__main__':
    env = os.environ.get('FLASK_ENV', 'development')
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 3000)),
        debug=(env == 'development')
    )
