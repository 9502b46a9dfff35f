#!/usr/bin/env python3
"""
HR Dashboard - Entry Point
Run the Flask application
"""

import logging
import os
import sys

# Add app directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from app.main import create_app
from app.config import get_config

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    app = create_app()
    server = get_config().server

    print(f"\n{'='*50}")
    print("  HR Dashboard - Candidate Analytics API")
    print(f"{'='*50}")
    print(f"  Server: http://{server.host}:{server.port}")
    print(f"  Debug Mode: {server.debug}")
    print(f"{'='*50}\n")

    app.run(host=server.host, port=server.port, debug=server.debug, threaded=True)
