# config/app_settings.py
# Server settings, overridable from the environment for deployment.
import os

HOST = os.environ.get("ECOYIELD_HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", 8050))
DEBUG = os.environ.get("ECOYIELD_DEBUG", "false").lower() in ("1", "true", "yes")

APP_TITLE = "EcoYield Investment Calculator"
TOKEN_NAME = "EcoYield"
