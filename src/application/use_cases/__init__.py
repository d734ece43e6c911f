"""Application use cases package."""

from .drawer_session import DrawerSession
from .load_drawer_state import LoadDrawerStateUseCase
from .save_drawer_state import SaveDrawerStateUseCase

__all__ = [
    "DrawerSession",
    "LoadDrawerStateUseCase",
    "SaveDrawerStateUseCase",
]
