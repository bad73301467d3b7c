"""Development entry point:  python run.py  (or  flask --app run run)."""
import os

from memorycards import create_app

app = create_app(os.environ.get("FLASK_CONFIG", "default"))

if __name__ == "__main__":
    app.run(host=os.environ.get("HOST", "127.0.0.1"), port=int(os.environ.get("PORT", "4000")))
