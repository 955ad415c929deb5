"""ASGI entrypoint for the glucose tracker API."""

from glucose_tracker.api.app import create_app
from glucose_tracker.containers import build_container

app = create_app(build_container())
