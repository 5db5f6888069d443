#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: flask --app compounding.wsgi run --port 5000 --debug

from __future__ import annotations

from compounding.app import create_app
from compounding.config import load_config

config = load_config()
app = create_app(config)


if __name__ == "__main__":
    app.run(host=config.server.host, port=config.server.port, debug=config.server.debug)
