# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from flask import Blueprint, current_app, send_from_directory

bp_site = Blueprint('site', __name__)

@bp_site.route('/')
def index():
    """Landing page. Other pages are served by the app's static route."""
    return send_from_directory(current_app.static_folder, "index.html")
