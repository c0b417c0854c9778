"""Store API — users, categories, products and token authentication over a relational store."""
