import os

from komplist.app import create_app


# WSGI entry point: `gunicorn app:app` or `flask --app app run`
app = create_app()


if __name__ == "__main__":
    app.run(
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "5000")),
        debug=app.config["DEBUG"],
    )
