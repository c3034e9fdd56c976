"""ASGI entrypoint for the Ayurvedic nutrition API."""

from ayur_nutrition.api.app import create_app
from ayur_nutrition.containers import build_container

app = create_app(build_container())
