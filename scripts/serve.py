import argparse

import uvicorn

from poster_app.config import settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the movie poster generator web app.")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes.")
    args = parser.parse_args()

    print(f"Serving on http://{args.host}:{args.port} (default model {settings.model_name})")
    uvicorn.run("poster_app.main:app", host=args.host, port=args.port, reload=args.reload)

if __name__ == "__main__":
    main()
