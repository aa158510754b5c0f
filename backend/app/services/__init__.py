"""Services Layer: per-resource controller actions between routes and the record store.

Invariants:
    - One handler class per resource, one method per routable action
    - Handlers raise core.errors exceptions; they never build HTTP responses

Design Decisions:
    - Routes stay thin (parse DTO, call handler, respond); handlers own the write order
"""
