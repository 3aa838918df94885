"""
Pydantic schema definitions for entities and API payloads.

Entities (players, matches, rankings) and request bodies live in
separate modules.  Field names on the wire and in the durable snapshot
use camelCase aliases; Python code uses snake_case attributes.
"""
