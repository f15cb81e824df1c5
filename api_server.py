#!/usr/bin/env python3
"""Recipe browser server.

Serves the recipe page and turns control clicks into selection events
for the single process-wide RecipeBrowser.
"""

from flask import Flask, request, jsonify, redirect
import os
import sys
import threading
from html import escape
from dotenv import load_dotenv

from lib.recipe_browser import (
    FILTER_GROUP,
    SORT_GROUP,
    RecipeBrowser,
    SelectionEvent,
    SelectionState,
    apply_event,
    build_view,
)
from lib.recipe_catalog import get_recipes
from templates.recipe_page_template import format_browser_page

load_dotenv()

RECIPE_DATA_PATH = os.getenv('RECIPE_DATA_PATH')

app = Flask(__name__)

browser = RecipeBrowser(get_recipes(RECIPE_DATA_PATH))
browser.start()

# Selection events are applied one at a time, whatever the WSGI server
_browser_lock = threading.Lock()

# Warnings from the latest form submission, shown once on the next page load
_pending_warnings = []


def view_payload(view, warnings=None, state=None) -> dict:
    """JSON body describing a selection and its view."""
    state = state or browser.state
    return {
        'filter': state.active_filter.value,
        'sort': state.active_sort.value,
        'count': len(view),
        'recipes': [recipe.to_dict() for recipe in view],
        'warnings': warnings or [],
    }


def error_page(message: str) -> str:
    """Generate simple HTML error page."""
    return f'''<!DOCTYPE html>
<html><head><title>Recipe Browser</title></head>
<body style="font-family: system-ui; padding: 2rem; max-width: 600px; margin: 0 auto;">
<div style="background: #fee; border: 1px solid #c00; padding: 1rem; border-radius: 8px;">
<strong style="color: #c00;">Error</strong><br>{escape(message)}
</div>
<p><a href="/">Back to recipes</a></p>
</body></html>'''


@app.route('/', methods=['GET'])
def index():
    """Serve the recipe browser page for the current selection."""
    with _browser_lock:
        warnings = list(_pending_warnings)
        _pending_warnings.clear()
        return format_browser_page(browser, warnings)


@app.route('/select', methods=['POST'])
def select():
    """Apply a selection event from a control.

    Accepts JSON ``{"group": ..., "key": ...}`` or the page's form post.
    """
    if request.is_json:
        data = request.get_json(force=True, silent=True) or {}
    else:
        data = request.form

    with _browser_lock:
        try:
            event = SelectionEvent.from_dict(data)
            warnings = browser.dispatch(event)
        except ValueError as e:
            if request.is_json:
                return jsonify({'error': str(e)}), 400
            return error_page(f"Error: {e}"), 400

        for warning in warnings:
            print(f"Warning: {warning}", file=sys.stderr)

        if not request.is_json:
            # Only the latest form post's warnings are shown
            _pending_warnings[:] = warnings
            return redirect('/', code=303)

        return jsonify(view_payload(browser.current_view(), warnings))


@app.route('/reset', methods=['POST'])
def reset():
    """Return to all recipes in catalog order."""
    with _browser_lock:
        browser.reset()
        return jsonify(view_payload(browser.current_view()))


@app.route('/api/recipes', methods=['GET'])
def api_recipes():
    """Return the current view, or a one-off view from filter/sort params.

    The one-off view leaves the browser's selection untouched.
    """
    filter_param = request.args.get('filter')
    sort_param = request.args.get('sort')

    if filter_param is None and sort_param is None:
        with _browser_lock:
            return jsonify(view_payload(browser.current_view()))

    state = SelectionState()
    warnings = []
    if filter_param is not None:
        state, found = apply_event(state, SelectionEvent(FILTER_GROUP, filter_param))
        warnings.extend(found)
    if sort_param is not None:
        state, found = apply_event(state, SelectionEvent(SORT_GROUP, sort_param))
        warnings.extend(found)

    view = build_view(browser.recipes, state)
    return jsonify(view_payload(view, warnings, state))


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint."""
    return jsonify({'status': 'ok'})


def run_server():
    """Run the development server, one request at a time."""
    port = int(os.getenv('PORT', 5001))
    host = os.getenv('HOST', '0.0.0.0')
    app.run(host=host, port=port, debug=False, threaded=False)


if __name__ == '__main__':
    run_server()
