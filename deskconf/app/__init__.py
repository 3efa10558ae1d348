# -*- coding: utf-8 -*-
from ._app import create_app
from .state import BackendState

__all__ = ["create_app", "BackendState"]
