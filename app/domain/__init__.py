"""
Domain layer: value objects, entities, repository interfaces and the
vacation calculation service. Nothing here depends on HTTP or storage.
"""
