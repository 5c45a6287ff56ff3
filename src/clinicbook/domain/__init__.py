"""
Domain layer: entities, field schema and business errors.
"""
