"""ASGI entrypoint for the Diet Genius API."""

from diet_genius.api.app import create_app
from diet_genius.containers import build_container

app = create_app(build_container())
