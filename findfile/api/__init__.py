"""HTTP API: routes and their dependencies"""
