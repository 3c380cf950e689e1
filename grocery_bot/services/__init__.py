"""
Services Package for Grocery Bot
================================

This package contains service modules that encapsulate persistence and
infrastructure concerns, kept apart from the pure voice compiler.

Available Services:
-------------------
- **grocery_list**: SQLAlchemy-backed grocery list implementing the list
  operations used by the plan executor

Usage:
------
    from grocery_bot.services.grocery_list import SqlGroceryList
"""
