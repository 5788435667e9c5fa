"""
RessourcesMG API
================
FastAPI application exposing the directory, its search and the back office.
"""
