"""
Routes Package for Grocery Bot
==============================

This package contains the API route definitions. Each module defines a
FastAPI APIRouter with related endpoints grouped together.

- voice.py: Compile voice commands into plans and execute confirmed plans
- grocery_list.py: Read the grocery list

Router Registration:
--------------------
All routers are registered in main.py under two prefixes:
1. /api/v1/* - Versioned API (recommended)
2. /* - Root paths
"""

from .voice import voice_router
from .grocery_list import grocery_list_router

__all__ = [
    "voice_router",
    "grocery_list_router",
]
