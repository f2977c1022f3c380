import argparse
import logging

import dash
from dash import dcc, html

from config_manager import get_config
from core.logging_config import setup_logging_from_config
from helpers.class_names import cn
from helpers.transformations import TRANSFORMATION_TYPES
from url_state.callbacks import register_callbacks

logger = logging.getLogger(__name__)

# Query key -> id of the control whose value is kept in the URL
DEFAULT_URL_BINDINGS = {
    'query': 'search-query-input',
    'type': 'transformation-type-select',
}


def create_app(config=None) -> dash.Dash:
    """Build the Dash app: logging from config, page shell and URL sync callbacks."""
    config = config or get_config()
    setup_logging_from_config(config.log_settings)

    app = dash.Dash(__name__, suppress_callback_exceptions=True)

    app.layout = html.Div([
        # Query state lives in this location's search string
        dcc.Location(id='url', refresh=False),
        dcc.Download(id='image-download'),
        html.Div([
            dcc.Input(id='search-query-input', type='text', debounce=True,
                      placeholder='Search transformations',
                      className=cn('px-3 py-2 rounded border')),
            dcc.Dropdown(id='transformation-type-select',
                         options=[{'label': item['title'], 'value': key}
                                  for key, item in TRANSFORMATION_TYPES.items()],
                         clearable=True),
            html.Button('Clear filters', id='clear-filters', n_clicks=0,
                        className=cn('px-3 py-2', 'rounded bg-gray-100')),
        ], className=cn('flex gap-2 p-4')),
        html.Div(id='page-content'),
    ])

    register_callbacks(app, 'url', DEFAULT_URL_BINDINGS, clear_button_id='clear-filters')
    logger.info("Image Transformation Studio app created")
    return app


def main():
    parser = argparse.ArgumentParser(description='Image Transformation Studio')
    parser.add_argument('--host', default='127.0.0.1', help='Interface to bind to')
    parser.add_argument('--port', type=int, default=8050, help='Port to listen on')
    parser.add_argument('--debug', action='store_true', help='Run with the Dash dev tools enabled')
    args = parser.parse_args()

    app = create_app()
    app.run(host=args.host, port=args.port, debug=args.debug, use_reloader=False)


if __name__ == '__main__':
    main()
