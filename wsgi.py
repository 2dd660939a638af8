"""WSGI entry point."""

import os

from devlog import create_app, db
from devlog.celery_app import init_celery

app = create_app(os.environ.get("FLASK_ENV", "production"))
celery = init_celery(app)

with app.app_context():
    db.create_all()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000)
