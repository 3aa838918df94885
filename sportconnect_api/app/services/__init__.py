"""
Service layer.

``membership_service`` holds the pure join-or-leave transition,
``match_store`` owns the canonical state and its persistence, and
``api_service`` is the asynchronous façade handed to API handlers.
"""
