"""
Pizzeria Backend
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the pizzeria package.
"""

import os

from pizzeria import create_app

# Create the Flask application using the factory
app = create_app()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=int(os.environ.get('PORT') or 5000),
            debug=app.config.get('ENV_NAME') == 'development')
