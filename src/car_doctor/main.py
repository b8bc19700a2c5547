"""Command-line entrypoint that serves the API with uvicorn."""

import uvicorn

from car_doctor.config import Settings


def main() -> None:
    """Serve the ASGI app on the configured host and port."""
    settings = Settings()
    uvicorn.run("car_doctor.api.asgi:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
