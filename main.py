"""Local/WSGI entrypoint.

Exposes `app` without shadowing the `housie/` package.
"""

from housie import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=8070, debug=False)
