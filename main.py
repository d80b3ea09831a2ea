# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

# NOTE: Development server only. In production the app is served by gunicorn
# (see gunicorn.conf.py), which builds it through archive.create_app().

from archive import create_app
from archive.config import Config

app = create_app(Config)

if __name__ == "__main__":
    app.run(Config.HOST, Config.PORT, debug=Config.DEBUG)
