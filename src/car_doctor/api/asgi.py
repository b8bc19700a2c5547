"""ASGI entrypoint for the car doctor API."""

from car_doctor.api.app import create_app
from car_doctor.containers import build_container

app = create_app(build_container())
