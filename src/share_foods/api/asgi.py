"""ASGI entrypoint for the ShareFoods API."""

from share_foods.api.app import create_app
from share_foods.containers import build_container

app = create_app(build_container())
