"""
repositories/ - Data Access Layer
==================================
Builds listing queries, runs them on the injected connection pool and maps
raw rows into domain model objects.
"""
