"""Domain layer for pocketbook application.

Services are imported from their modules (e.g. ``pocketbook.domain.account``)
so that the database layer can import entities without pulling services in.
"""
