import importlib

from config import get_settings_module

from class_attendance.main import create_app

app = create_app()

if __name__ == "__main__":
    settings = importlib.import_module(get_settings_module())
    app.run(host=getattr(settings, "HOST", "127.0.0.1"), port=int(getattr(settings, "PORT", 3000)))
