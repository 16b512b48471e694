"""HTTP layer: routes and dependency providers"""
