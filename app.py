# app.py
import logging

from dash import Dash

# -----------------------------------------------------------
# Core Imports
# -----------------------------------------------------------

from config.app_settings import APP_TITLE, DEBUG, HOST, PORT
from layout.main_layout import main_layout

from callbacks.calculator_callbacks import register_calculator_callbacks

# Initialize app
app = Dash(__name__, title=APP_TITLE, suppress_callback_exceptions=True)
server = app.server

# -----------------------------------------------------------
# Layout Assignment & Callback Registration
# -----------------------------------------------------------

app.layout = main_layout

register_calculator_callbacks(app)

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.run(debug=DEBUG, host=HOST, port=PORT)
