"""Currencies blueprint for creating and inspecting currencies."""

from __future__ import annotations

from flask_smorest import Blueprint

blp = Blueprint("Currencies", __name__, description="Currency management endpoints")

from . import routes  # noqa: E402,F401
