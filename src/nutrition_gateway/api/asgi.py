"""ASGI entrypoint for the nutrition gateway API."""

from nutrition_gateway.api.app import create_app
from nutrition_gateway.containers import build_container

app = create_app(build_container())
