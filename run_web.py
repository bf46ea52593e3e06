"""Launch the Pineapple OFC JSON API."""
import argparse
import logging

from ofc.web.app import app

if __name__ == '__main__':
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--host', default='0.0.0.0')
    parser.add_argument('--port', type=int, default=5000)
    parser.add_argument('--debug', action='store_true')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)
    print(f"Starting Pineapple OFC at http://localhost:{args.port}")
    app.run(debug=args.debug, host=args.host, port=args.port)
