import os

from olympiads import create_app

# This is the entry point for local development.
# It creates the Flask app instance using the factory from the olympiads package.
app = create_app()

if __name__ == '__main__':
    # 'debug=True' allows for hot-reloading when you save changes.
    app.run(port=int(os.environ.get('PORT') or 3000), debug=True)
